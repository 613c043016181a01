from bs4 import BeautifulSoup

from club.content import DocumentReference, NetworkError, NotFound
from club.notes import NotePage


class DictFetcher:
    """Serves notes from a dict; missing names raise NotFound."""

    def __init__(self, notes):
        self.notes = notes
        self.fetched = []

    def fetch(self, reference):
        self.fetched.append(reference.name)
        if reference.name not in self.notes:
            raise NotFound()
        return self.notes[reference.name]


class OfflineFetcher:
    def fetch(self, reference):
        raise NetworkError("connection refused")


A = DocumentReference("a")
B = DocumentReference("b")


def test_load_renders_and_annotates(registry):
    page = NotePage(DictFetcher({"a": "# Title\r\n\r\n```python\r\nx = 1  \r\n```\r\n"}), registry)
    page.load(A)

    assert page.status == "ready"
    assert page.error is None
    soup = BeautifulSoup(page.html, "html.parser")
    assert soup.find("h1").get_text() == "Title"
    code = soup.select_one("pre > code")
    assert code["data-highlighted"] == "yes"
    assert code.find("span") is not None


def test_not_found_replaces_previous_content(registry):
    page = NotePage(DictFetcher({"a": "# A"}), registry)
    page.load(A)
    assert page.html is not None

    page.load(B)
    assert page.status == "error"
    assert page.html is None
    assert page.error == "Markdown file not found"
    assert page.error_status == 404


def test_network_error(registry):
    page = NotePage(OfflineFetcher(), registry).load(A)
    assert page.html is None
    assert page.error == "connection refused"
    assert page.error_status == 502


def test_navigate_clears_error_and_content(registry):
    page = NotePage(DictFetcher({}), registry).load(A)
    assert page.error is not None

    page.navigate(B)
    assert page.error is None
    assert page.html is None
    assert page.status == "loading"
    assert page.reference == B


def test_every_load_fetches_again(registry):
    fetcher = DictFetcher({"a": "# A"})
    page = NotePage(fetcher, registry)
    page.load(A)
    page.load(A)
    assert fetcher.fetched == ["a", "a"]


def test_late_result_for_superseded_navigation_is_discarded(registry):
    page = NotePage(DictFetcher({}), registry)
    ticket_a = page.navigate(A)
    ticket_b = page.navigate(B)

    assert page.resolve(ticket_b, "# Bravo") is True
    assert page.resolve(ticket_a, "# Alpha") is False

    assert page.reference == B
    assert "Bravo" in page.html
    assert "Alpha" not in page.html


def test_late_failure_for_superseded_navigation_is_discarded(registry):
    page = NotePage(DictFetcher({}), registry)
    ticket_a = page.navigate(A)
    ticket_b = page.navigate(B)

    assert page.fail(ticket_a, NotFound()) is False
    assert page.status == "loading"

    page.resolve(ticket_b, "# Bravo")
    assert page.status == "ready"
    assert page.error is None


def test_content_and_error_never_both_set(registry):
    page = NotePage(DictFetcher({"a": "# A"}), registry)
    for reference in (A, B, A, B):
        page.load(reference)
        assert (page.html is None) != (page.error is None)


def test_highlighted_blocks_keep_indentation(registry):
    python_source = "def f(n):\n    if n:\n        return 1\n    return 0"
    js_source = "function f() {\n    if (x) {\n        return 1;\n    }\n}"
    markdown = f"```python\n{python_source}\n```\n\n```js\n{js_source}\n```\n"

    page = NotePage(DictFetcher({"a": markdown}), registry).load(A)

    blocks = BeautifulSoup(page.html, "html.parser").select("pre > code")
    assert [code.get_text() for code in blocks] == [python_source, js_source]
    assert all(code.find("span") is not None for code in blocks)
