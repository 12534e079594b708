# ==========================================================
# downline/admin.py
# ==========================================================
from django.contrib import admin

from .models import Ibo


# ==========================================================
# ✅ IBO ADMIN
# ==========================================================
@admin.register(Ibo)
class IboAdmin(admin.ModelAdmin):
    list_display = (
        "ibo_id",
        "name",
        "upline_id",
        "qualification",
        "group_pv",
        "bbs_tickets",
        "wes_tickets",
        "has_cep",
        "registration_date",
    )
    search_fields = ("ibo_id", "name", "email", "upline_id")
    list_filter = ("qualification", "role", "has_cep")
    ordering = ("ibo_id",)
