"""
Django settings for ClubSite.

Values come from environment variables with development defaults.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-insecure-club-site-key")

DEBUG = _env_bool("DJANGO_DEBUG", default=True)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "club",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "ClubSite.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "club.context_processors.site",
            ],
        },
    },
]

WSGI_APPLICATION = "ClubSite.wsgi.application"

# No models; the site keeps no persistent state
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "America/New_York"
USE_I18N = False
USE_TZ = True

STATIC_URL = "static/"

# --- Notes pipeline -------------------------------------------------------

# "storage" reads CLUB_CONTENT_ROOT directly, "http" GETs <base>/content/<name>.md
CLUB_CONTENT_BACKEND = os.environ.get("CLUB_CONTENT_BACKEND", "storage")
CLUB_CONTENT_ROOT = Path(os.environ.get("CLUB_CONTENT_ROOT", BASE_DIR / "content"))
CLUB_CONTENT_BASE_URL = os.environ.get("CLUB_CONTENT_BASE_URL", "http://localhost:8000")

_fetch_timeout = os.environ.get("CLUB_FETCH_TIMEOUT")
CLUB_FETCH_TIMEOUT = float(_fetch_timeout) if _fetch_timeout else None

# Language tag -> Pygments lexer name
CLUB_HIGHLIGHT_LANGUAGES = {
    "cpp": "cpp",
    "c++": "cpp",
    "cc": "cpp",
    "c": "cpp",
    "python": "python",
    "py": "python",
    "python3": "python",
    "javascript": "javascript",
    "js": "javascript",
}

# "auto" | "mathml" | "none"
CLUB_MATH_ENGINE = os.environ.get("CLUB_MATH_ENGINE", "auto")

# Browser-side MathJax; empty string disables the script tag
MATHJAX_URL = os.environ.get(
    "MATHJAX_URL", "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-chtml.js"
)

CLUB_NAME = "UGA ICPC Club"
CLUB_LOGO_URL = "https://acm-uga.github.io/resources/social_img/csip.png"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "club": {
            "handlers": ["console"],
            "level": os.environ.get("CLUB_LOG_LEVEL", "INFO"),
        },
    },
}
