from django.apps import AppConfig
from django.conf import settings


class ClubConfig(AppConfig):
    name = 'club'

    highlight_registry = None
    math_engine = None

    def ready(self):
        """Build the highlighting registry and resolve the math engine once."""
        from club.markdown.highlighting import HighlightRegistry
        from club.markdown.math_engine import get_math_engine

        self.highlight_registry = HighlightRegistry.from_settings(
            getattr(settings, "CLUB_HIGHLIGHT_LANGUAGES", None)
        )
        self.math_engine = get_math_engine(getattr(settings, "CLUB_MATH_ENGINE", "auto"))
