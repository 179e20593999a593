import json

from django.core.management.base import BaseCommand, CommandError
from graphql import introspection_from_schema, print_schema

from ...exceptions import SchemaLoadError
from ...loader import SchemaLoader


class Command(BaseCommand):
    help = "Print the configured GraphQL schema as SDL (Schema Definition Language) or JSON."

    def add_arguments(self, parser):
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Output as JSON introspection result instead of SDL.",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="Indentation level for JSON output (default: 2).",
        )

    def handle(self, *args, **options):
        try:
            schema = SchemaLoader().load()
        except SchemaLoadError as exc:
            raise CommandError(f"Failed to introspect schema: {exc}") from exc

        if options["json"]:
            output = json.dumps(introspection_from_schema(schema), indent=options["indent"])
        else:
            output = print_schema(schema)

        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(self.style.SUCCESS(f"Schema written to {options['output_file']}"))
        else:
            self.stdout.write(output)
