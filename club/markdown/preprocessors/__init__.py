# club/markdown/preprocessors/__init__.py

from .normalizer import normalize_text_default

PREPROCESSORS = [
    normalize_text_default,  # Must be first: everything after sees "\n" only
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
