# club/markdown/postprocessors/details_enhancer.py
"""
Postprocessor that marks collapsible sections.

Raw HTML in a note:
    <details>
    <summary>Hint</summary>

    Try a **greedy** choice first.

    </details>

Pandoc keeps the elements and parses the Markdown inside. This
postprocessor adds the style classes:
    <details class="collapsible">
        <summary class="collapsible-summary">Hint</summary>
        <p>Try a <strong>greedy</strong> choice first.</p>
    </details>

The ``open`` attribute is left untouched so the browser's native
expand/collapse behavior is kept.
"""

from bs4 import BeautifulSoup

from ..config import DETAILS_CLASS, SUMMARY_CLASS


def _add_class(element, cls):
    classes = element.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    if cls not in classes:
        classes.append(cls)
    element["class"] = classes


def details_enhancer(html: str, context: dict) -> str:
    soup = BeautifulSoup(html, "html.parser")

    for details in soup.find_all("details"):
        _add_class(details, DETAILS_CLASS)
        summary = details.find("summary", recursive=False)
        if summary is not None:
            _add_class(summary, SUMMARY_CLASS)

    return str(soup)


def details_enhancer_default(html: str, context: dict) -> str:
    """Default instance of details enhancer postprocessor"""
    return details_enhancer(html, context)
