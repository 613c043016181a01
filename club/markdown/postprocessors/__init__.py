# club/markdown/postprocessors/__init__.py

from .details_enhancer import details_enhancer_default
from .element_styles import element_styles_default
from .sanitizer import sanitize_html

POSTPROCESSORS = [
    sanitize_html,
    element_styles_default,  # Fixed img/table/th/td styling
    details_enhancer_default,  # Style classes for details/summary
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
