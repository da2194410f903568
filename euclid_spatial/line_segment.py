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

"""LineSegment - Pure geometry primitive for 3D line segments."""

import logging
from collections import namedtuple
from functools import cached_property
from typing import Optional, Protocol

import numpy as np

from .errors import DegenerateGeometryError
from .vectors import Point3D, UnitVector3D

logger = logging.getLogger(__name__)

# Relative precision of a float64 (half the machine epsilon).
DOUBLE_PRECISION = 2.0 ** -53

# Smallest positive subnormal float64.
SMALLEST_POSITIVE_DOUBLE = float(np.nextafter(0.0, 1.0))

SegmentMetrics = namedtuple('SegmentMetrics', ['length', 'direction'])


class PlaneLike(Protocol):
    """The two plane operations a segment relies on."""

    def project(self, segment: 'LineSegment') -> 'LineSegment':
        ...

    def intersection_with(self, segment: 'LineSegment', tolerance: float) -> Optional[Point3D]:
        ...


class LineSegment:
    """
    Represent a 3D line segment defined by start and end points.

    Pure geometry class - no application-specific logic.
    The endpoints are fixed at construction; length and direction are
    derived together on first use and cached.
    """

    def __init__(self, start, end):
        """
        Initialize line segment from start and end points.

        Args:
            start: Start point, a Point3D or [x, y, z]
            end: End point, a Point3D or [x, y, z]

        Raises
        ------
        ValueError
            If points are not 3D
        DegenerateGeometryError
            If start and end are the same point

        """
        try:
            start = Point3D.of(start)
            end = Point3D.of(end)
        except ValueError:
            raise ValueError("Start and end must be 3D points [x, y, z]") from None

        if start == end:
            raise DegenerateGeometryError(f"Segment start and end are both {start}")

        self._start = start
        self._end = end

    @classmethod
    def _from_trusted(cls, start, end):
        """Restore a previously valid segment without re-checking it."""
        segment = cls.__new__(cls)
        segment._start = start
        segment._end = end
        return segment

    @classmethod
    def parse(cls, start_text, end_text):
        """
        Create a segment from the text of its two endpoints.

        Args:
            start_text: Coordinate text of the start point, e.g. "0, 0, 0"
            end_text: Coordinate text of the end point, e.g. "(10; 0; 0)"

        Raises
        ------
        ParseFailure
            If either text is not a 3D point
        DegenerateGeometryError
            If both texts describe the same point

        """
        return cls(Point3D.parse(start_text), Point3D.parse(end_text))

    @classmethod
    def from_dict(cls, data):
        """Build a segment from a mapping with 'start' and 'end' keys."""
        return cls(data['start'], data['end'])

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    @cached_property
    def metrics(self):
        """Length and direction, computed together from one vector."""
        vector = self._end - self._start
        length = vector.length
        return SegmentMetrics(length, vector.normalize())

    def length(self):
        """Distance from start to end."""
        return self.metrics.length

    def direction(self):
        """Unit vector pointing from start to end."""
        return self.metrics.direction

    def midpoint(self):
        """Calculate midpoint of the segment."""
        return self.point_at(0.5)

    def point_at(self, t):
        """
        Get point along segment at parameter t.

        Args:
            t: Parameter value (0 = start, 1 = end)

        Returns
        -------
        Point3D
            Point at parameter t

        """
        return self._start + t * (self._end - self._start)

    def reversed(self):
        return LineSegment._from_trusted(self._end, self._start)

    def closest_point_to(self, point, clamp_to_segment):
        """
        Return the point on the line closest to ``point``.

        Args:
            point: Point3D or [x, y, z] to project
            clamp_to_segment: If True the result stays between start and end,
                otherwise it may lie anywhere on the infinite line

        Returns
        -------
        Point3D
            The orthogonal projection, clamped when requested

        """
        point = Point3D.of(point)
        length, direction = self.metrics
        t = (point - self._start).dot_product(direction)
        if clamp_to_segment:
            t = min(max(t, 0.0), length)
        return self._start + t * direction

    def segment_to(self, point, clamp_to_segment):
        """
        Return the shortest segment from this line to ``point``.

        Raises
        ------
        DegenerateGeometryError
            If the point lies on the line (the result would have zero length)

        """
        point = Point3D.of(point)
        return LineSegment(self.closest_point_to(point, clamp_to_segment), point)

    def project_on(self, plane: PlaneLike):
        """The segment projected on a plane."""
        return plane.project(self)

    def intersection_with(self, plane: PlaneLike, tolerance=SMALLEST_POSITIVE_DOUBLE):
        """Point where the segment crosses ``plane``, or None."""
        return plane.intersection_with(self, tolerance)

    def is_parallel_to(self, other, angle_tolerance=None):
        """
        Check whether two segments are parallel.

        Args:
            other: LineSegment to compare against
            angle_tolerance: Maximum angle in radians between the directions.
                When omitted, only rounding-level deviation is allowed.

        Returns
        -------
        bool
            True if parallel or anti-parallel

        """
        if angle_tolerance is None:
            return self.direction().is_parallel_to(other.direction(), 2 * DOUBLE_PRECISION)
        return self.direction().is_parallel_to_within_angle(other.direction(), angle_tolerance)

    def to_dict(self):
        return {
            'start': self._start.tolist(),
            'end': self._end.tolist(),
        }

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self):
        return (hash(self._start) * 397) ^ hash(self._end)

    def __str__(self):
        return f"StartPoint: {self._start}, EndPoint: {self._end}"

    def __repr__(self):
        """Return string representation of line segment."""
        return f"LineSegment({self._start!r}, {self._end!r})"
