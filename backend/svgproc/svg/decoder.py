"""XML decoder — SVG text → generic attribute tree, under a wall-clock budget.

Tree shape (one node per element):
    {"$": {attr: value, ...}, "rect": node | [node, ...], "_": "text"}

A tag seen once under a parent decodes to a bare node, repeated tags to a
list. Callers must go through ``as_list`` before iterating children.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any

import defusedxml.ElementTree as DET

from svgproc.svg.errors import ParseError, ParseErrorKind

logger = logging.getLogger(__name__)

Node = dict[str, Any]

ATTRS_KEY = "$"
TEXT_KEY = "_"

_OPERATION = "XML parsing"


def as_list(node: Any) -> list[Any]:
    """Normalize a decoded child slot into a list."""
    if node is None:
        return []
    if isinstance(node, list):
        return node
    return [node]


SVG_NS = "http://www.w3.org/2000/svg"
_SVG_NS_PREFIX = "{" + SVG_NS + "}"


def strip_ns(name: str) -> str:
    """Drop the SVG namespace. Foreign namespaces stay qualified, e.g. '{urn:a}rect'."""
    if name.startswith(_SVG_NS_PREFIX):
        return name[len(_SVG_NS_PREFIX) :]
    return name


def _attach(parent: Node, tag: str, child: Node) -> None:
    existing = parent.get(tag)
    if existing is None:
        parent[tag] = child
    elif isinstance(existing, list):
        existing.append(child)
    else:
        parent[tag] = [existing, child]


def _to_tree(root: ET.Element) -> Node:
    """Convert an Element into the attribute tree. Iterative, so nesting depth is not a concern."""
    tree: Node = {}
    stack: list[tuple[ET.Element, Node, str]] = [(root, tree, strip_ns(root.tag))]
    while stack:
        element, parent, tag = stack.pop()
        node: Node = {}
        if element.attrib:
            node[ATTRS_KEY] = {strip_ns(k): v for k, v in element.attrib.items()}
        text = (element.text or "").strip()
        if text:
            node[TEXT_KEY] = text
        _attach(parent, tag, node)
        # Reversed so children pop off the stack in document order
        for child in reversed(list(element)):
            if not isinstance(child.tag, str):
                continue
            stack.append((child, node, strip_ns(child.tag)))
    return tree


def _decode(svg_text: str) -> Node:
    root = DET.fromstring(svg_text)
    return _to_tree(root)


def decode_xml(svg_text: str, timeout_ms: int) -> Node:
    """Decode ``svg_text`` into ``{root_tag: root_node}``.

    The decode runs on a worker thread and the caller waits at most
    ``timeout_ms``. A timed-out decode is abandoned, not killed: the worker
    finishes in the background and its result is dropped.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="svg-decode")
    try:
        future = executor.submit(_decode, svg_text)
        try:
            return future.result(timeout=timeout_ms / 1000)
        except FuturesTimeoutError:
            logger.warning("%s exceeded %dms, abandoning decode", _OPERATION, timeout_ms)
            raise ParseError(
                ParseErrorKind.TIMEOUT,
                f"{_OPERATION} timed out after {timeout_ms}ms",
                operation=_OPERATION,
                timeout_ms=timeout_ms,
            ) from None
        except (ET.ParseError, ValueError) as e:
            # defusedxml forbidden constructs and unencodable text (lone surrogates) are ValueErrors
            raise ParseError(
                ParseErrorKind.INVALID_XML,
                "Invalid SVG: Failed to parse XML",
                detail=str(e),
            ) from e
    finally:
        executor.shutdown(wait=False)
