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
Permissive coordinate-tuple grammar.

Coordinates are signed decimal or exponential numbers that may use either
``.`` or ``,`` as the decimal separator. Consecutive coordinates are split
by one ``,``, ``;`` or space, optionally padded with spaces, and the whole
tuple may be wrapped in parentheses::

    "1,2"       -> (1.0, 2.0)
    "(1; 2)"    -> (1.0, 2.0)
    "1 2"       -> (1.0, 2.0)
    "1,5,2,5"   -> (1.5, 2.5)

Because a comma can be either a decimal or a list separator, every way of
splitting the text is enumerated and the text is rejected unless exactly
one reading survives. ``"1,2,3"`` therefore does not parse as a pair.

A leading comma is a valid coordinate on its own (``",2"`` is 0.2), so a
space before a comma makes the text ambiguous: ``"1 ,2"`` reads both as
``(1, 2)`` and as ``(1, 0.2)`` and is rejected. ``"1, 2"`` and ``"1 , 2"``
have a single reading.
"""

import logging
import re

logger = logging.getLogger(__name__)

DOUBLE_PATTERN = r'[+-]?\d*(?:[.,]\d+)?(?:[eE][+-]?\d+)?'
SEPARATOR_PATTERN = r' *[,; ] *'

_DOUBLE = re.compile(DOUBLE_PATTERN, re.ASCII)
_SEPARATOR = re.compile(SEPARATOR_PATTERN)
_SEPARATOR_CHARS = ',; '


def try_parse(text, dimensions):
    """
    Parse ``text`` into a tuple of ``dimensions`` floats.

    Args:
        text: Free-form coordinate text
        dimensions: Number of coordinates expected (at least 1)

    Returns
    -------
    tuple or None
        The parsed coordinates, or None when the text is empty, does not
        match the grammar, matches it in more than one way, or holds a
        coordinate that is not a finite-format number.

    """
    if dimensions < 1:
        raise ValueError(f"dimensions must be at least 1, got {dimensions}")
    if text is None or not text.strip():
        return None

    body = _strip_parentheses(text)
    if body is None:
        return None

    readings = set()
    for reading in _readings(body, dimensions):
        readings.add(reading)
        if len(readings) > 1:
            logger.debug("Rejecting ambiguous coordinate text %r", text)
            return None

    if not readings:
        return None
    return tuple(_to_float(value) for value in readings.pop())


def try_parse_2d(text):
    """Parse an ``x, y`` pair, returning None when the text does not match."""
    return try_parse(text, 2)


def try_parse_3d(text):
    """Parse an ``x, y, z`` triple, returning None when the text does not match."""
    return try_parse(text, 3)


def _strip_parentheses(text):
    stripped = text.strip()
    opens = stripped.startswith('(')
    closes = stripped.endswith(')')
    if opens != closes:
        return None
    if opens:
        stripped = stripped[1:-1].strip(' ')
    return stripped or None


def _readings(body, count):
    """Yield every tuple of coordinate strings that spells ``body`` exactly."""
    if count == 1:
        if _is_coordinate(body):
            yield (body,)
        return

    for end in range(1, len(body)):
        if body[end] not in _SEPARATOR_CHARS:
            continue
        head = body[:end]
        if not _is_coordinate(head):
            continue
        for start in range(end + 1, len(body)):
            if body[start - 1] not in _SEPARATOR_CHARS:
                break
            if not _SEPARATOR.fullmatch(body, end, start):
                continue
            for rest in _readings(body[start:], count - 1):
                yield (head,) + rest


def _is_coordinate(value):
    return _DOUBLE.fullmatch(value) is not None and _to_float(value) is not None


def _to_float(value):
    if not any(c.isdigit() for c in value):
        return None
    try:
        return float(value.replace(',', '.'))
    except ValueError:
        return None
