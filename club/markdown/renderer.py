# club/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors


def render_markdown(text, context=None):
    """
    Convert a note's Markdown to HTML with pre/post processing.

    Args:
        text: Raw markdown text
        context: Optional dict shared by the processors
    """
    context = context or {}

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    pandoc_config = get_pandoc_config()

    html = pypandoc.convert_text(
        text,
        to=pandoc_config["to"],
        format=pandoc_config["format"],
        extra_args=pandoc_config["extra_args"],
    )

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
