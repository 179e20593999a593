import json

from django.core.management.base import BaseCommand, CommandError

from ...exceptions import SchemaLoadError
from ...services import SchemaSearchService


class Command(BaseCommand):
    help = (
        "Show details of one schema element by path "
        "(e.g. 'Query.users', 'User', '@deprecated')."
    )

    def add_arguments(self, parser):
        parser.add_argument("path", help="Path of the schema element.")
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="Indentation level for JSON output (default: 2).",
        )

    def handle(self, *args, **options):
        path = options["path"]
        try:
            details = SchemaSearchService().element_details(path)
        except SchemaLoadError as exc:
            raise CommandError(f"Failed to get element details: {exc}") from exc

        if details is None:
            raise CommandError(f"Element not found: {path}")
        self.stdout.write(json.dumps(details.to_dict(), indent=options["indent"]))
