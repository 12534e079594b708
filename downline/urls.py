# downline/urls.py

from django.urls import path

from downline import views

urlpatterns = [

    # ===================== NETWORK STATS =====================
    path("member/<str:member_id>/stats/", views.member_stats, name="member_stats"),
    path("network/export/", views.export_network_stats, name="export_network_stats"),
]
