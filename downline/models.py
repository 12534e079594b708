from decimal import Decimal

from django.db import models
from django.utils import timezone

from downline.utils.ids import normalize_id


# ==========================================================
# QUALIFICATION / ROLE CHOICES
# ==========================================================
QUALIFICATION_CHOICES = [
    ("Incaricato", "Incaricato"),
    ("Pacesetter", "Pacesetter"),
    ("Doppio Pacesetter", "Doppio Pacesetter"),
    ("Leaders Club", "Leaders Club"),
    ("Executive Leaders Club", "Executive Leaders Club"),
    ("Produttore Argento", "Produttore Argento"),
    ("Platino", "Platino"),
    ("Smeraldo", "Smeraldo"),
    ("Diamante", "Diamante"),
]

ROLE_CHOICES = [
    ("TITOLARE", "Titolare"),
    ("COLLABORATORE", "Collaboratore"),
    ("OSPITE", "Ospite"),
]


# ==========================================================
# IBO MODEL (SPONSOR TREE ROSTER)
# ==========================================================
class Ibo(models.Model):
    """
    One IBO of the downline.

    The upline is kept as a plain id instead of a ForeignKey: imported
    sheets reference IBOs that are not (yet) in the roster, and may even
    loop. The stats engine copes with both.
    """
    ibo_id = models.CharField(max_length=50, primary_key=True)
    name = models.CharField(max_length=200)
    email = models.EmailField(blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, default="")
    upline_id = models.CharField(max_length=50, blank=True, null=True, db_index=True)

    qualification = models.CharField(max_length=40, choices=QUALIFICATION_CHOICES, default="Incaricato")
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default="TITOLARE")

    # -------------------------
    # VITAL SIGNS
    # -------------------------
    personal_pv = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    group_pv = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    plans_presented = models.IntegerField(default=0)
    new_personal_sponsors = models.IntegerField(default=0)
    new_recruits_count = models.IntegerField(default=0)
    has_cep = models.BooleanField(default=False)
    bbs_tickets = models.IntegerField(default=0)
    wes_tickets = models.IntegerField(default=0)
    bbs_guests = models.IntegerField(default=0)
    wes_guests = models.IntegerField(default=0)
    active_frontlines = models.IntegerField(default=0)
    lc_lines = models.IntegerField(default=0)
    total_team_size = models.IntegerField(default=0)
    validated_by_platinum = models.BooleanField(default=False)

    registration_date = models.DateField(blank=True, null=True)
    # "YYYY-MM" → archived vital signs of that month
    history = models.JSONField(default=dict, blank=True)

    # -------------------------
    # META
    # -------------------------
    created_at = models.DateTimeField(default=timezone.now)
    last_update = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at", "ibo_id"]
        verbose_name = "IBO"
        verbose_name_plural = "IBO"

    def __str__(self):
        return f"{self.ibo_id} - {self.name}"

    def save(self, *args, **kwargs):
        self.ibo_id = normalize_id(self.ibo_id)
        # blank upline = root; "0" is a real (normalized) id
        if self.upline_id is not None and str(self.upline_id).strip():
            self.upline_id = normalize_id(self.upline_id)
        else:
            self.upline_id = None
        super().save(*args, **kwargs)

    # ==========================================================
    # RECORD FOR THE STATS ENGINE
    # ==========================================================
    def as_record(self):
        return {
            "id": self.ibo_id,
            "name": self.name,
            "upline_id": self.upline_id,
            "registration_date": self.registration_date,
            "history": self.history or {},
            "vital_signs": {
                "group_pv": self.group_pv,
                "bbs_tickets": self.bbs_tickets,
                "wes_tickets": self.wes_tickets,
                "has_cep": self.has_cep,
                "last_update": self.last_update,
            },
        }
