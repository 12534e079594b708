# downline/management/commands/network_report.py

from django.core.management.base import BaseCommand, CommandError

from downline.services import build_network_report, downline_network, load_network


class Command(BaseCommand):
    help = "Print the network report used as context for the AI coach"

    def add_arguments(self, parser):
        parser.add_argument("--member", help="Only this IBO's organization")

    def handle(self, *args, **options):
        members = load_network()
        if options["member"]:
            members = downline_network(members, options["member"])
            if not members:
                raise CommandError(f"IBO {options['member']} not found")

        report = build_network_report(members)
        if not report:
            self.stdout.write(self.style.WARNING("No IBO with group PV to report"))
            return

        self.stdout.write(report)
