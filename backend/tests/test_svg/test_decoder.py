"""Tests for the XML decoder and its timeout."""

import time

import pytest

from svgproc.svg import decoder
from svgproc.svg.decoder import as_list, decode_xml
from svgproc.svg.errors import ParseError, ParseErrorKind


def test_as_list():
    assert as_list(None) == []
    assert as_list({"$": {}}) == [{"$": {}}]
    nodes = [{"$": {}}, {"$": {}}]
    assert as_list(nodes) is nodes


def test_single_child_is_bare_node():
    tree = decode_xml('<svg width="10"><rect x="1"/></svg>', 1000)
    assert isinstance(tree["svg"]["rect"], dict)
    assert tree["svg"]["rect"]["$"] == {"x": "1"}


def test_repeated_children_become_list():
    tree = decode_xml('<svg><rect x="1"/><rect x="2"/><rect x="3"/></svg>', 1000)
    rects = tree["svg"]["rect"]
    assert [r["$"]["x"] for r in rects] == ["1", "2", "3"]


def test_namespace_stripped():
    tree = decode_xml('<svg xmlns="http://www.w3.org/2000/svg" height="5"><rect/></svg>', 1000)
    assert tree["svg"]["$"] == {"height": "5"}
    assert "rect" in tree["svg"]


def test_malformed_xml():
    with pytest.raises(ParseError) as exc_info:
        decode_xml("<svg><not closed properly", 1000)
    assert exc_info.value.kind is ParseErrorKind.INVALID_XML
    assert exc_info.value.message == "Invalid SVG: Failed to parse XML"


def test_entity_expansion_rejected():
    bomb = (
        '<?xml version="1.0"?>'
        '<!DOCTYPE svg [<!ENTITY a "aaaaaaaaaa"><!ENTITY b "&a;&a;&a;&a;">]>'
        '<svg width="10" height="10">&b;</svg>'
    )
    with pytest.raises(ParseError) as exc_info:
        decode_xml(bomb, 1000)
    assert exc_info.value.kind is ParseErrorKind.INVALID_XML


def test_timeout(monkeypatch):
    def slow_decode(svg_text):
        time.sleep(0.5)
        return {"svg": {}}

    monkeypatch.setattr(decoder, "_decode", slow_decode)

    start = time.perf_counter()
    with pytest.raises(ParseError) as exc_info:
        decode_xml("<svg/>", 50)
    elapsed = time.perf_counter() - start

    err = exc_info.value
    assert err.kind is ParseErrorKind.TIMEOUT
    assert err.message == "XML parsing timed out after 50ms"
    assert err.metadata["operation"] == "XML parsing"
    assert err.metadata["timeout_ms"] == 50
    # The caller is released before the slow decode finishes
    assert elapsed < 0.5


def test_foreign_namespace_attribute_stays_qualified():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" xmlns:a="urn:a"><rect width="10" a:width="0"/></svg>'
    attrs = decode_xml(svg, 1000)["svg"]["rect"]["$"]
    assert attrs == {"width": "10", "{urn:a}width": "0"}


def test_foreign_namespace_tag_stays_qualified():
    svg = '<svg xmlns="http://www.w3.org/2000/svg" xmlns:a="urn:a"><a:rect width="10"/></svg>'
    root = decode_xml(svg, 1000)["svg"]
    assert "rect" not in root
    assert "{urn:a}rect" in root


def test_prefixed_svg_namespace_stripped():
    svg = '<s:svg xmlns:s="http://www.w3.org/2000/svg" width="5"><s:rect x="1"/></s:svg>'
    root = decode_xml(svg, 1000)["svg"]
    assert root["rect"]["$"] == {"x": "1"}


def test_lone_surrogate_is_invalid_xml():
    with pytest.raises(ParseError) as exc_info:
        decode_xml('<svg width="10" height="10"><desc>\ud800</desc></svg>', 1000)
    assert exc_info.value.kind is ParseErrorKind.INVALID_XML
