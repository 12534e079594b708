import datetime
from decimal import Decimal

from django.test import TestCase

from downline.models import Ibo
from downline.services import (
    build_network_report,
    downline_network,
    format_display_name,
    load_network,
    member_dashboard,
)


class IboModelTest(TestCase):
    def test_ids_normalized_on_save(self):
        ibo = Ibo.objects.create(ibo_id=" 0042 ", name="Rossi", upline_id="007")
        self.assertEqual(ibo.ibo_id, "42")
        self.assertEqual(ibo.upline_id, "7")

        root = Ibo.objects.create(ibo_id="1", name="Root", upline_id="  ")
        self.assertIsNone(root.upline_id)

    def test_zero_upline_is_kept(self):
        ibo = Ibo.objects.create(ibo_id="5", name="Verdi", upline_id="0")
        self.assertEqual(ibo.upline_id, "")
        self.assertEqual(ibo.as_record()["upline_id"], "")

    def test_as_record(self):
        ibo = Ibo.objects.create(
            ibo_id="5", name="Bianchi", upline_id="1",
            group_pv=Decimal("450.00"), bbs_tickets=2, has_cep=True,
            registration_date=datetime.date(2025, 2, 1),
        )
        record = ibo.as_record()

        self.assertEqual(record["id"], "5")
        self.assertEqual(record["upline_id"], "1")
        self.assertEqual(record["vital_signs"]["group_pv"], Decimal("450.00"))
        self.assertEqual(record["history"], {})
        self.assertNotIn("personal_pv", record["vital_signs"])


class MemberDashboardTest(TestCase):
    def setUp(self):
        Ibo.objects.create(ibo_id="1", name="Lentinello, Carmelo", group_pv=Decimal("1500"), bbs_tickets=1)
        Ibo.objects.create(ibo_id="2", name="Rossi  Mario", upline_id="1", group_pv=Decimal("300"), has_cep=True)
        Ibo.objects.create(ibo_id="3", name="Verdi", upline_id="1", group_pv=Decimal("1300"), bbs_tickets=4)
        Ibo.objects.create(ibo_id="4", name="Neri", upline_id="1", group_pv=Decimal("0"))
        Ibo.objects.create(ibo_id="5", name="Gialli", upline_id="3", wes_tickets=6)

    def test_org_stats_and_objective(self):
        payload = member_dashboard("001", "ALL")

        self.assertEqual(payload["id"], "1")
        self.assertEqual(payload["name"], "Lentinello Carmelo")
        self.assertEqual(payload["org_stats"]["total_vpg"], 1500)
        self.assertEqual(payload["org_stats"]["total_bbs"], 5)
        self.assertEqual(payload["org_stats"]["total_wes"], 6)
        self.assertEqual(payload["org_stats"]["total_cep"], 1)
        self.assertEqual(payload["org_stats"]["new_recruits"], 4)
        self.assertEqual(payload["org_stats"]["active_lines"], 2)
        self.assertEqual(payload["org_stats"]["qualified_lines"], 1)
        self.assertEqual(payload["next_objective"]["id"], "ELC")

    def test_frontlines_with_volume_sorted(self):
        payload = member_dashboard("1")

        self.assertEqual([line["id"] for line in payload["frontlines"]], ["3", "2"])
        self.assertEqual(payload["frontlines"][0]["target"]["id"], "ELC")
        self.assertEqual(payload["frontlines"][1]["target"]["id"], "LC")
        self.assertEqual(payload["frontlines"][1]["name"], "Rossi Mario")

    def test_unknown_member(self):
        self.assertIsNone(member_dashboard("999"))

    def test_in_memory_members(self):
        members = [{"id": "1", "name": "Solo", "vital_signs": {"group_pv": 150}}]
        payload = member_dashboard("1", members=members)

        self.assertEqual(payload["next_objective"]["id"], "3")
        self.assertEqual(payload["frontlines"], [])


class DownlineNetworkTest(TestCase):
    def setUp(self):
        Ibo.objects.create(ibo_id="1", name="Root")
        Ibo.objects.create(ibo_id="2", name="A", upline_id="1")
        Ibo.objects.create(ibo_id="3", name="B", upline_id="2")
        Ibo.objects.create(ibo_id="4", name="Other")

    def test_member_and_downline(self):
        scoped = downline_network(load_network(), "2")
        self.assertEqual(sorted(r["id"] for r in scoped), ["2", "3"])

    def test_unknown_member(self):
        self.assertEqual(downline_network(load_network(), "77"), [])


class NetworkReportTest(TestCase):
    def test_only_members_with_volume(self):
        members = [
            {"id": "1", "name": "Carmelo", "vital_signs": {"group_pv": 2000, "bbs_tickets": 3, "wes_tickets": 1, "has_cep": True}},
            {"id": "2", "name": "Zero", "vital_signs": {"group_pv": 0}},
        ]
        report = build_network_report(members)

        self.assertEqual(report, "LEADER: Carmelo (ID: 1) - VPG: 2000, BBS: 3, WES: 1, CEP: SI")

    def test_empty(self):
        self.assertEqual(build_network_report([]), "")


class DisplayNameTest(TestCase):
    def test_format(self):
        self.assertEqual(format_display_name("Rossi,  Mario "), "Rossi Mario")
        self.assertEqual(format_display_name(""), "Leader")
        self.assertEqual(format_display_name(None), "Leader")
