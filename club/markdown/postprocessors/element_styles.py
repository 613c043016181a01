# club/markdown/postprocessors/element_styles.py
"""
Postprocessor that applies the fixed element overrides from config.

    <img src="x.png">   →  <img src="x.png" style="max-width: 100%; ...">
    <table>             →  <table class="md-table" style="margin: 1em auto; ...">
    <th>, <td>          →  bordered, padded cells
"""

from bs4 import BeautifulSoup

from ..config import ELEMENT_STYLES


def apply_element_styles(html: str, context: dict, styles: dict = ELEMENT_STYLES) -> str:
    soup = BeautifulSoup(html, "html.parser")

    for tag_name, overrides in styles.items():
        for element in soup.find_all(tag_name):
            for attr, value in overrides.items():
                if attr == "class":
                    classes = element.get("class", [])
                    for cls in value:
                        if cls not in classes:
                            classes.append(cls)
                    element["class"] = classes
                else:
                    element[attr] = value

    return str(soup)


def element_styles_default(html: str, context: dict) -> str:
    """
    Default configuration for apply_element_styles.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return apply_element_styles(html, context)
