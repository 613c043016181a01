from django.apps import apps
from django.http import Http404, HttpResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.cache import never_cache
from django.views.generic import TemplateView

from .content import (
    ContentError,
    DocumentReference,
    NotFound,
    StorageContentFetcher,
    get_content_fetcher,
)
from .notes import NotePage
from .workshops import WORKSHOPS


class IndexView(TemplateView):
    """Homepage: welcome text and what the club offers."""

    template_name = "club/index.html"


class WorkshopsView(TemplateView):
    """Weekly workshops, each linking to its note."""

    template_name = "club/workshops.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["workshops"] = WORKSHOPS
        return context


class ContestsView(TemplateView):
    template_name = "club/contests.html"


class LeaderboardView(TemplateView):
    template_name = "club/leaderboard.html"


class CalendarView(TemplateView):
    template_name = "club/calendar.html"


@method_decorator(never_cache, name="dispatch")
class NoteDetailView(TemplateView):
    """
    Render ``/notes/<name>`` from ``/content/<name>.md``.

    Every request runs the whole pipeline again; nothing from a previous
    note is reused. A failed retrieval shows only the error message.
    """

    template_name = "club/note_detail.html"

    def get_note_page(self):
        config = apps.get_app_config("club")
        return NotePage(
            get_content_fetcher(),
            config.highlight_registry,
            config.math_engine,
        )

    def get(self, request, *args, **kwargs):
        page = self.get_note_page().load(DocumentReference(self.kwargs["name"]))
        context = self.get_context_data(note=page, **kwargs)
        return self.render_to_response(context, status=page.error_status or 200)


@method_decorator(never_cache, name="dispatch")
class ContentFileView(View):
    """Serve a note's Markdown source as plain text."""

    def get(self, request, name):
        try:
            text = StorageContentFetcher().fetch(DocumentReference(name))
        except NotFound:
            raise Http404("Markdown file not found")
        except ContentError as exc:
            return HttpResponse(str(exc), status=exc.status_code, content_type="text/plain")
        return HttpResponse(text, content_type="text/plain; charset=utf-8")
