"""Tests for the StartPoint/EndPoint XML round trip."""

from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from euclid_spatial.errors import ParseFailure
from euclid_spatial.line_segment import LineSegment
from euclid_spatial.vectors import Point3D
from euclid_spatial.xml_io import (
    read_point,
    read_segment_file,
    segment_from_xml_string,
    segment_to_element,
    segment_to_xml_string,
    write_segment_file,
)


def test_written_document_has_start_then_end() -> None:
    segment = LineSegment((1, 2, 3), (4, 5, 6))
    element = segment_to_element(segment)

    assert element.tag == 'LineSegment'
    assert [child.tag for child in element] == ['StartPoint', 'EndPoint']
    assert element[0].attrib == {'X': '1.0', 'Y': '2.0', 'Z': '3.0'}
    assert element[1].attrib == {'X': '4.0', 'Y': '5.0', 'Z': '6.0'}


def test_round_trip_preserves_exact_values() -> None:
    segment = LineSegment((0.1, -1e-17, 1 / 3), (2.0 ** 0.5, 1e300, -7.25))
    restored = segment_from_xml_string(segment_to_xml_string(segment))
    assert restored == segment
    assert restored.length() == segment.length()


def test_reading_tolerates_wrapper_elements() -> None:
    text = """
    <Document>
      <Items>
        <Line3D>
          <StartPoint X="0" Y="0" Z="0" />
          <EndPoint><X>10</X><Y>0</Y><Z>0</Z></EndPoint>
        </Line3D>
      </Items>
    </Document>
    """
    assert segment_from_xml_string(text) == LineSegment((0, 0, 0), (10, 0, 0))


def test_reading_handles_namespaces() -> None:
    text = (
        '<s:Line xmlns:s="urn:spatial">'
        '<s:StartPoint X="1" Y="1" Z="1"/><s:EndPoint X="2" Y="2" Z="2"/>'
        '</s:Line>'
    )
    assert segment_from_xml_string(text) == LineSegment((1, 1, 1), (2, 2, 2))


def test_reading_restores_fields_without_degeneracy_check() -> None:
    text = '<L><StartPoint X="1" Y="1" Z="1"/><EndPoint X="1" Y="1" Z="1"/></L>'
    segment = segment_from_xml_string(text)
    assert segment.start == segment.end == Point3D(1, 1, 1)


@pytest.mark.parametrize(
    "text",
    [
        '<L><EndPoint X="1" Y="1" Z="1"/><StartPoint X="0" Y="0" Z="0"/></L>',
        '<L><StartPoint X="0" Y="0" Z="0"/></L>',
        '<L><StartPoint X="0" Y="0" Z="0"/><EndPoint X="1" Y="1" Z="1"/>'
        '<EndPoint X="2" Y="2" Z="2"/></L>',
        '<L><StartPoint X="0" Y="0"/><EndPoint X="1" Y="1" Z="1"/></L>',
        '<L><StartPoint X="zero" Y="0" Z="0"/><EndPoint X="1" Y="1" Z="1"/></L>',
        '<L><Other/></L>',
        '<L><StartPoint',
    ],
)
def test_malformed_documents_are_rejected(text) -> None:
    with pytest.raises(ParseFailure):
        segment_from_xml_string(text)


def test_read_point_from_child_elements() -> None:
    element = ET.fromstring('<P><X> 1.5 </X><Y>-2</Y><Z>3e2</Z></P>')
    assert read_point(element) == Point3D(1.5, -2, 300)


def test_file_round_trip(tmp_path) -> None:
    segment = LineSegment((0, 0, 0), (1, 2, 3))
    path = tmp_path / "segment.xml"

    write_segment_file(segment, path)

    assert path.read_text(encoding='utf-8').startswith("<?xml")
    assert read_segment_file(path) == segment
