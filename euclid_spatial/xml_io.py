# Copyright 2025 Berkan Tali
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
XML round trip for points and segments.

A segment is written as::

    <LineSegment>
      <StartPoint X="0.0" Y="0.0" Z="0.0" />
      <EndPoint X="10.0" Y="0.0" Z="0.0" />
    </LineSegment>

Reading accepts the same document nested inside any wrapper elements, and
point coordinates given either as attributes or as X/Y/Z child elements.
"""

import xml.etree.ElementTree as ET

from .errors import ParseFailure
from .line_segment import LineSegment
from .vectors import Point3D

START_TAG = 'StartPoint'
END_TAG = 'EndPoint'
_AXES = ('X', 'Y', 'Z')


def _local_name(tag):
    return tag.rsplit('}', 1)[-1]


def write_point(parent, tag, point):
    """Append ``point`` to ``parent`` as an element named ``tag``."""
    attributes = {axis: repr(value) for axis, value in zip(_AXES, point.tolist())}
    return ET.SubElement(parent, tag, attributes)


def read_point(element):
    """
    Read a Point3D from an element.

    Raises
    ------
    ParseFailure
        If a coordinate is missing or not a number

    """
    children = {_local_name(child.tag): child.text for child in element}
    values = []
    for axis in _AXES:
        raw = element.get(axis)
        if raw is None:
            raw = children.get(axis)
        if raw is None:
            raise ParseFailure(ET.tostring(element, encoding='unicode'), 'a Point3D element')
        try:
            values.append(float(raw.strip()))
        except ValueError:
            raise ParseFailure(raw, f"the {axis} coordinate") from None
    return Point3D(*values)


def segment_to_element(segment, tag='LineSegment'):
    element = ET.Element(tag)
    write_point(element, START_TAG, segment.start)
    write_point(element, END_TAG, segment.end)
    return element


def segment_from_element(element):
    """
    Restore a LineSegment from its element or from any element wrapping it.

    The endpoints are assigned directly; the document is assumed to come
    from a valid segment.

    Raises
    ------
    ParseFailure
        If no element holds exactly one StartPoint followed by one EndPoint

    """
    holder = _find_holder(element)
    if holder is None:
        raise ParseFailure(ET.tostring(element, encoding='unicode'), 'a LineSegment element')

    endpoints = [child for child in holder if _local_name(child.tag) in (START_TAG, END_TAG)]
    if [_local_name(child.tag) for child in endpoints] != [START_TAG, END_TAG]:
        raise ParseFailure(
            ET.tostring(holder, encoding='unicode'),
            f"a LineSegment element with one {START_TAG} followed by one {END_TAG}",
        )

    start, end = (read_point(child) for child in endpoints)
    return LineSegment._from_trusted(start, end)


def _find_holder(element):
    for candidate in element.iter():
        if any(_local_name(child.tag) == START_TAG for child in candidate):
            return candidate
    return None


def segment_to_xml_string(segment, tag='LineSegment'):
    return ET.tostring(segment_to_element(segment, tag), encoding='unicode')


def segment_from_xml_string(text):
    """Parse an XML document and restore the LineSegment it contains."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError:
        raise ParseFailure(text, 'an XML document') from None
    return segment_from_element(root)


def write_segment_file(segment, path, tag='LineSegment'):
    tree = ET.ElementTree(segment_to_element(segment, tag))
    tree.write(str(path), encoding='utf-8', xml_declaration=True)


def read_segment_file(path):
    return segment_from_element(ET.parse(str(path)).getroot())
