# downline/management/commands/network_stats.py

from django.core.management.base import BaseCommand, CommandError

from downline.mlm.stats_engine import aggregate_network_stats, empty_stats
from downline.mlm.tree import index_roster
from downline.ranks import get_auto_target
from downline.services import default_month_filter, downline_network, load_network
from downline.utils.ids import normalize_id
from downline.utils.months import validate_month_filter


class Command(BaseCommand):
    help = "Print aggregated network stats and next qualification target for every IBO"

    def add_arguments(self, parser):
        parser.add_argument("--month", help="'ALL' or YYYY-MM (default from settings)")
        parser.add_argument("--member", help="Only this IBO and their downline")

    def handle(self, *args, **options):
        try:
            month_filter = validate_month_filter(options["month"] or default_month_filter())
        except ValueError as exc:
            raise CommandError(str(exc))

        members = load_network()
        # the whole network is rolled up; --member only narrows what is printed
        network_stats = aggregate_network_stats(members, month_filter)

        shown = index_roster(members)
        if options["member"]:
            scoped = downline_network(members, options["member"])
            if not scoped:
                raise CommandError(f"IBO {options['member']} not found")
            shown = {normalize_id(record["id"]): record for record in scoped}

        self.stdout.write("IBO | Name | VPG | BBS | WES | CEP | Recruits | Lines | LC Lines | Next Target")
        self.stdout.write("-" * 95)
        for key, record in shown.items():
            stats = network_stats.get(key) or empty_stats()
            target = get_auto_target(stats["vpg"], stats["active_lines"], stats["qualified_lines"])
            self.stdout.write(
                f"{record['id']} | {record['name']} | {stats['vpg']} | {stats['bbs']} | "
                f"{stats['wes']} | {stats['cep']} | {stats['recruits']} | "
                f"{stats['active_lines']} | {stats['qualified_lines']} | {target.label}"
            )

        self.stdout.write(self.style.SUCCESS(f"Network stats for {len(shown)} IBO (month={month_filter})"))
