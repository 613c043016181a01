import logging

from bs4 import BeautifulSoup

from club.markdown.renderer import render_markdown


def _soup(markdown):
    return BeautifulSoup(render_markdown(markdown), "html.parser")


def test_top_level_text_is_a_block():
    soup = _soup("just one line")
    assert soup.find("p").get_text() == "just one line"


def test_crlf_input_is_normalized_before_conversion():
    assert render_markdown("# Title\r\n\r\nBody  \r\n") == render_markdown("# Title\n\nBody\n")


def test_image_gets_responsive_style():
    img = _soup("![graph](graph.png)").find("img")
    assert "max-width: 100%" in img["style"]
    assert "height: auto" in img["style"]


def test_table_and_cells_get_structural_styling():
    soup = _soup("| a | b |\n|---|---|\n| 1 | 2 |\n")
    table = soup.find("table")
    assert "md-table" in table["class"]
    assert "border-collapse: collapse" in table["style"]
    assert "background: #f8f8f8" in soup.find("th")["style"]
    assert "border: 1px solid #ccc" in soup.find("td")["style"]


def test_details_and_summary_get_style_classes():
    soup = _soup(
        "<details>\n<summary>Hint</summary>\n\nTry a greedy choice.\n\n</details>\n"
    )
    details = soup.find("details")
    summary = details.find("summary")
    assert "collapsible" in details["class"]
    assert "collapsible-summary" in summary["class"]
    assert summary.get_text().strip() == "Hint"
    assert "greedy" in details.get_text()
    assert not details.has_attr("open")


def test_open_details_stays_open():
    details = _soup("<details open>\n<summary>Shown</summary>\n\nBody\n\n</details>\n").find("details")
    assert details.has_attr("open")


def test_math_becomes_math_nodes():
    soup = _soup("Inline $x^2$ and\n\n$$\\sum_i i$$\n")
    inline = soup.find("span", class_="inline")
    display = soup.find("span", class_="display")
    assert "math" in inline["class"]
    assert "x^2" in inline.get_text()
    assert "math" in display["class"]
    assert "\\sum_i i" in display.get_text()


def test_fenced_code_keeps_language_and_is_not_highlighted_yet():
    soup = _soup("```cpp\nint main() {}\n```\n")
    code = soup.select_one("pre > code")
    classes = code.get("class", []) + code.parent.get("class", [])
    assert "cpp" in classes
    assert code.find("span") is None
    assert code.get_text() == "int main() {}"


def test_malformed_markdown_renders_as_text():
    soup = _soup("**never closed\n\n[broken](")
    text = soup.get_text()
    assert "**never closed" in text
    assert "[broken](" in text


def test_disallowed_raw_html_is_escaped_not_executed():
    html = render_markdown("<script>alert(1)</script>\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("script") is None
    assert "alert(1)" in soup.get_text()


def test_benign_raw_html_passes_through():
    soup = _soup('<div style="color: red">hi</div>\n\n<u>under</u> and <small>fine print</small>\n')
    div = soup.find("div")
    assert div.get_text() == "hi"
    assert "color: red" in div["style"]
    assert soup.find("u").get_text() == "under"
    assert soup.find("small").get_text() == "fine print"
    assert "&lt;u&gt;" not in str(soup)


def test_unsafe_css_is_dropped_from_raw_style():
    div = _soup('<div style="color: blue; background-image: url(javascript:alert(1))">x</div>\n').find("div")
    assert "color: blue" in div["style"]
    assert "javascript" not in div["style"]


def test_render_does_not_emit_pandoc_deprecation_warnings(caplog):
    with caplog.at_level(logging.WARNING):
        render_markdown("```cpp\nint x;\n```\n")
    assert not [r for r in caplog.records if "Deprecated" in r.getMessage()]
