from django.conf import settings

NAV_LINKS = (
    ("Home", "index"),
    ("Workshops", "workshops"),
    ("Contests", "contests"),
    ("Leaderboard", "leaderboard"),
    ("Calendar", "calendar"),
)


def site(request):
    """Header, nav and MathJax settings shared by every page."""
    return {
        "club_name": settings.CLUB_NAME,
        "club_logo_url": settings.CLUB_LOGO_URL,
        "nav_links": NAV_LINKS,
        "mathjax_url": getattr(settings, "MATHJAX_URL", ""),
    }
