from django.urls import path

from .views import (
    CalendarView,
    ContentFileView,
    ContestsView,
    IndexView,
    LeaderboardView,
    NoteDetailView,
    WorkshopsView,
)

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("calendar", CalendarView.as_view(), name="calendar"),
    path("workshops", WorkshopsView.as_view(), name="workshops"),
    path("contests", ContestsView.as_view(), name="contests"),
    path("leaderboard", LeaderboardView.as_view(), name="leaderboard"),
    path("notes/<str:name>", NoteDetailView.as_view(), name="note-detail"),
    path("content/<str:name>.md", ContentFileView.as_view(), name="note-source"),
]
