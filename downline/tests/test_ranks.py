from django.test import SimpleTestCase

from downline.ranks import (
    EXECUTIVE_LC,
    LEADERS_CLUB,
    PLATINUM,
    QUALIFICATION_LADDER,
    SILVER,
    THREE_PERCENT,
    get_auto_target,
    is_qualified_line,
    target_progress,
)


class AutoTargetTest(SimpleTestCase):
    def test_zero_volume_is_entry_tier(self):
        self.assertEqual(get_auto_target(0), THREE_PERCENT)

    def test_threshold_boundaries(self):
        cases = [
            (199, THREE_PERCENT),
            (200, LEADERS_CLUB),
            (1199, LEADERS_CLUB),
            (1200, EXECUTIVE_LC),
            (3999.99, EXECUTIVE_LC),
            (4000, SILVER),
            (9999, SILVER),
            (10000, PLATINUM),
            (250000, PLATINUM),
        ]
        for vpg, expected in cases:
            self.assertEqual(get_auto_target(vpg), expected, f"vpg={vpg}")

    def test_leaders_club_boundary_straddle(self):
        self.assertNotEqual(get_auto_target(1200), get_auto_target(1199))

    def test_invalid_volume_falls_to_entry_tier(self):
        for vpg in [-1, -5000, float("nan"), None, "abc"]:
            self.assertEqual(get_auto_target(vpg), THREE_PERCENT)

    def test_numeric_strings_accepted(self):
        self.assertEqual(get_auto_target("1200"), EXECUTIVE_LC)

    def test_line_counts_do_not_change_volume_decision(self):
        for vpg in [0, 199, 200, 1200, 4000, 10000]:
            self.assertEqual(get_auto_target(vpg), get_auto_target(vpg, 0, 0))
            self.assertEqual(get_auto_target(vpg), get_auto_target(vpg, 8, 4))

    def test_total_over_range(self):
        for vpg in range(0, 20001, 37):
            self.assertIn(get_auto_target(vpg), QUALIFICATION_LADDER)


class LadderTest(SimpleTestCase):
    def test_ladder_ascending_volume(self):
        volumes = [r.min_vpg for r in QUALIFICATION_LADDER]
        self.assertEqual(volumes, sorted(volumes))

    def test_ladder_is_read_only(self):
        with self.assertRaises(AttributeError):
            LEADERS_CLUB.min_vpg = 1

    def test_qualified_line(self):
        self.assertTrue(is_qualified_line(1200))
        self.assertFalse(is_qualified_line(1199))
        self.assertFalse(is_qualified_line(None))


class TargetProgressTest(SimpleTestCase):
    def test_progress_capped(self):
        stats = {"vpg": 600, "cep": 10, "bbs": 0, "wes": 5, "active_lines": 1, "qualified_lines": 0}
        progress = target_progress(stats, LEADERS_CLUB)

        self.assertEqual(progress["vpg"], 50.0)
        self.assertEqual(progress["cep"], 100)
        self.assertEqual(progress["bbs"], 0)
        self.assertEqual(progress["wes"], 50.0)
        self.assertEqual(progress["active_lines"], 100)
        # no qualified lines required for Leaders Club
        self.assertEqual(progress["qualified_lines"], 100)

    def test_missing_metrics(self):
        progress = target_progress({}, THREE_PERCENT)
        self.assertEqual(progress["vpg"], 0)
