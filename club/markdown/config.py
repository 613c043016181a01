# Pandoc input format: CommonMark-ish Markdown plus raw HTML, TeX math,
# pipe tables and fenced code with attributes.
PANDOC_FORMAT = "+".join(
    [
        "markdown",
        "raw_html",
        "markdown_in_html_blocks",
        "tex_math_dollars",
        "pipe_tables",
        "backtick_code_blocks",
        "fenced_code_attributes",
        "autolink_bare_uris",
        "strikeout",
        "task_lists",
    ]
)


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Math is left as ``<span class="math ...">`` nodes with MathJax delimiters
    so the annotator (or MathJax in the browser) can typeset it. Pandoc's own
    highlighting is turned off; code blocks come out as
    ``<pre class="lang"><code>`` and are highlighted by the annotator.
    """
    return {
        "format": PANDOC_FORMAT,
        "to": "html5",
        "extra_args": [
            "--mathjax",
            "--syntax-highlighting=none",
            "--wrap=none",
        ],
    }


# Fixed inline styles applied to rendered elements
ELEMENT_STYLES = {
    "img": {
        "style": "max-width: 100%; height: auto; display: block; margin: 1em auto",
    },
    "table": {
        "class": ["md-table"],
        "style": "margin: 1em auto; border-collapse: collapse; width: 100%",
    },
    "th": {
        "style": "border: 1px solid #ccc; padding: 0.5em; background: #f8f8f8",
    },
    "td": {
        "style": "border: 1px solid #ccc; padding: 0.5em",
    },
}

DETAILS_CLASS = "collapsible"
SUMMARY_CLASS = "collapsible-summary"
