import json

from django.core.management.base import BaseCommand, CommandError

from ...exceptions import SchemaLoadError
from ...services import SchemaSearchService


class Command(BaseCommand):
    help = (
        "Search the GraphQL schema for types, fields, arguments and directives "
        "whose name or description contains every keyword."
    )

    def add_arguments(self, parser):
        parser.add_argument("query", help="Keywords separated by spaces.")
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="Indentation level for JSON output (default: 2).",
        )

    def handle(self, *args, **options):
        try:
            results = SchemaSearchService().search(options["query"])
        except SchemaLoadError as exc:
            raise CommandError(f"Failed to search schema: {exc}") from exc

        payload = [element.to_dict() for element in results]
        self.stdout.write(json.dumps(payload, indent=options["indent"]))
