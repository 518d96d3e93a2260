# === FILE: page_digest/parser/html_parser.py ===
"""HTML to plain-text extraction for PageDigest.

:func:`extract_text` walks the parsed document from ``<body>`` and collects
the text of every *leaf* node, i.e. a node without children: text runs and
empty elements such as ``<img>`` or ``<br>``.  Every leaf contributes its
text followed by a single space, in document order, so

    <body><p>Hello <b>world</b></p><img src="x"></body>

becomes ``"Hello  world  "``.  The buffer is returned untrimmed; callers
tokenize on whitespace anyway.

Text that is never rendered (comments, doctype, ``<script>``, ``<style>``
and ``<template>`` contents) is skipped.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

from page_digest.errors import ParseError

__all__: Sequence[str] = ("extract_text", "iter_leaves")

_INVISIBLE_TAGS = frozenset({"script", "style", "template", "noscript"})
_SKIPPED_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


def _is_invisible(node: PageElement) -> bool:
    parent = node.parent
    while parent is not None:
        if isinstance(parent, Tag) and parent.name in _INVISIBLE_TAGS:
            return True
        parent = parent.parent
    return False


def iter_leaves(root: Tag):
    """Yield leaf nodes under *root* in pre-order (document order)."""
    for node in root.descendants:
        if isinstance(node, NavigableString):
            if isinstance(node, _SKIPPED_STRINGS) or _is_invisible(node):
                continue
            yield node
        elif isinstance(node, Tag):
            if node.name in _INVISIBLE_TAGS or node.contents:
                continue
            if _is_invisible(node):
                continue
            yield node


def extract_text(html: Union[str, bytes]) -> str:
    """Return the leaf-node text of *html*, each leaf followed by one space.

    Raises
    ------
    ParseError
        If *html* is not ``str``/``bytes`` or the parser rejects the markup.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"expected str or bytes, got {type(html).__name__}")

    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(exc) from exc

    # html.parser does not synthesize <body> for fragments
    root = soup.body if soup.body is not None else soup

    parts: list[str] = []
    for leaf in iter_leaves(root):
        parts.append(leaf.get_text() if isinstance(leaf, Tag) else str(leaf))
        parts.append(" ")
    return "".join(parts)
