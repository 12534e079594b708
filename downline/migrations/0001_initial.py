from decimal import Decimal

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Ibo",
            fields=[
                ("ibo_id", models.CharField(max_length=50, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=200)),
                ("email", models.EmailField(blank=True, max_length=254, null=True)),
                ("phone", models.CharField(blank=True, default="", max_length=20)),
                ("upline_id", models.CharField(blank=True, db_index=True, max_length=50, null=True)),
                (
                    "qualification",
                    models.CharField(
                        choices=[
                            ("Incaricato", "Incaricato"),
                            ("Pacesetter", "Pacesetter"),
                            ("Doppio Pacesetter", "Doppio Pacesetter"),
                            ("Leaders Club", "Leaders Club"),
                            ("Executive Leaders Club", "Executive Leaders Club"),
                            ("Produttore Argento", "Produttore Argento"),
                            ("Platino", "Platino"),
                            ("Smeraldo", "Smeraldo"),
                            ("Diamante", "Diamante"),
                        ],
                        default="Incaricato",
                        max_length=40,
                    ),
                ),
                (
                    "role",
                    models.CharField(
                        choices=[
                            ("TITOLARE", "Titolare"),
                            ("COLLABORATORE", "Collaboratore"),
                            ("OSPITE", "Ospite"),
                        ],
                        default="TITOLARE",
                        max_length=20,
                    ),
                ),
                ("personal_pv", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("group_pv", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("plans_presented", models.IntegerField(default=0)),
                ("new_personal_sponsors", models.IntegerField(default=0)),
                ("new_recruits_count", models.IntegerField(default=0)),
                ("has_cep", models.BooleanField(default=False)),
                ("bbs_tickets", models.IntegerField(default=0)),
                ("wes_tickets", models.IntegerField(default=0)),
                ("bbs_guests", models.IntegerField(default=0)),
                ("wes_guests", models.IntegerField(default=0)),
                ("active_frontlines", models.IntegerField(default=0)),
                ("lc_lines", models.IntegerField(default=0)),
                ("total_team_size", models.IntegerField(default=0)),
                ("validated_by_platinum", models.BooleanField(default=False)),
                ("registration_date", models.DateField(blank=True, null=True)),
                ("history", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("last_update", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "IBO",
                "verbose_name_plural": "IBO",
                "ordering": ["created_at", "ibo_id"],
            },
        ),
    ]
