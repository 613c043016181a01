"""
Management command to render a note the same way /notes/<name> does.

Useful for checking a new Markdown file before publishing it.
"""

from django.apps import apps
from django.core.management.base import BaseCommand, CommandError

from club.content import ContentError, DocumentReference, get_content_fetcher
from club.markdown.preprocessors.normalizer import normalize_text
from club.notes import NotePage


class Command(BaseCommand):
    help = 'Render a Markdown note from the content store and print the HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'name',
            help='Note name, e.g. "graph" for /content/graph.md',
        )
        parser.add_argument(
            '--raw',
            action='store_true',
            help='Print the normalized Markdown instead of HTML',
        )

    def handle(self, *args, **options):
        reference = DocumentReference(options['name'])
        fetcher = get_content_fetcher()

        if options['raw']:
            try:
                text = fetcher.fetch(reference)
            except ContentError as exc:
                raise CommandError(str(exc)) from exc
            self.stdout.write(normalize_text(text), ending='')
            return

        config = apps.get_app_config('club')
        page = NotePage(fetcher, config.highlight_registry, config.math_engine)
        page.load(reference)

        if page.error is not None:
            raise CommandError(page.error)

        self.stdout.write(page.html)
        if options['verbosity'] > 1:
            self.stderr.write(self.style.SUCCESS(f"Rendered {reference.path}"))
