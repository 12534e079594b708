# downline/apps.py
from django.apps import AppConfig


class DownlineConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "downline"
    verbose_name = "Downline IBO"
