# File: tests/test_html_parser.py
import pytest

from page_digest.errors import ParseError
from page_digest.parser.html_parser import extract_text


def test_leaf_text_joined_with_single_spaces():
    html = '<html><body><p>Hello <b>world</b></p><img src="x.png"></body></html>'
    assert extract_text(html) == "Hello  world  "


def test_only_body_is_walked():
    html = "<html><head><title>Title</title></head><body><h1>Head</h1><p>Text</p></body></html>"
    assert extract_text(html) == "Head Text "


def test_document_order_is_preserved():
    html = "<body><div><p>one</p><ul><li>two</li><li>three</li></ul></div><p>four</p></body>"
    assert extract_text(html).split() == ["one", "two", "three", "four"]


def test_empty_body_gives_empty_string():
    assert extract_text("<html><body></body></html>") == ""
    assert extract_text("") == ""


def test_bytes_input():
    html = '<html><head><meta charset="utf-8"></head><body><p>Привет</p></body></html>'.encode("utf-8")
    assert extract_text(html) == "Привет "


def test_scripts_styles_and_comments_are_skipped():
    html = (
        "<body><script>var x = 1;</script><style>p {color: red}</style>"
        "<!-- hidden --><p>shown</p><template><p>later</p></template></body>"
    )
    assert extract_text(html) == "shown "


def test_fragment_without_body_is_walked_from_root():
    assert extract_text("<p>Just a fragment.</p>") == "Just a fragment. "


def test_result_is_not_trimmed():
    assert extract_text("<body> padded </body>") == " padded  "


@pytest.mark.parametrize("bad", [None, 42, ["<p>x</p>"]])
def test_non_html_input_raises_parse_error(bad):
    with pytest.raises(ParseError):
        extract_text(bad)
