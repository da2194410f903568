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

"""Plane - infinite plane in 3D, the collaborator LineSegment projects onto."""

import logging

from .errors import DegenerateGeometryError
from .line_segment import LineSegment
from .vectors import Point3D, UnitVector3D, Vector3D

logger = logging.getLogger(__name__)


class Plane:
    """
    Represent a plane by its unit normal and a point lying on it.

    Points p on the plane satisfy ``normal . p + d == 0``.
    """

    def __init__(self, normal, root_point):
        """
        Initialize plane from a normal and a root point.

        Args:
            normal: Normal direction, a Vector3D or [x, y, z]; normalized here
            root_point: Any point on the plane, a Point3D or [x, y, z]

        Raises
        ------
        DegenerateGeometryError
            If the normal has zero length

        """
        if not isinstance(normal, Vector3D):
            normal = Vector3D(*normal)
        self.normal = normal.normalize()
        self.root_point = Point3D.of(root_point)

    @classmethod
    def from_points(cls, p1, p2, p3):
        """
        Create the plane through three points.

        Raises
        ------
        DegenerateGeometryError
            If the points are collinear

        """
        p1, p2, p3 = Point3D.of(p1), Point3D.of(p2), Point3D.of(p3)
        normal = (p2 - p1).cross_product(p3 - p1)
        if normal.length == 0.0:
            raise DegenerateGeometryError("Cannot build a plane from collinear points")
        return cls(normal, p1)

    @property
    def d(self):
        return -self.normal.dot_product(self.root_point - Point3D.origin())

    def signed_distance_to(self, point):
        """Distance from the plane, positive on the side the normal points to."""
        return self.normal.dot_product(Point3D.of(point) - self.root_point)

    def project_point(self, point):
        """Foot of the perpendicular from ``point`` onto the plane."""
        point = Point3D.of(point)
        return point - self.signed_distance_to(point) * self.normal

    def project(self, segment):
        """
        Project a segment onto the plane.

        Raises
        ------
        DegenerateGeometryError
            If the segment is perpendicular to the plane

        """
        return LineSegment(self.project_point(segment.start), self.project_point(segment.end))

    def intersection_with(self, segment, tolerance):
        """
        Find where a segment crosses the plane.

        Args:
            segment: LineSegment to intersect
            tolerance: Largest |direction . normal| treated as parallel

        Returns
        -------
        Point3D or None
            The crossing point, or None if the segment runs parallel to the
            plane or stops short of it

        """
        if segment.direction().is_perpendicular_to(self.normal, tolerance):
            logger.debug("Segment %s is parallel to the plane", segment)
            return None

        span = segment.end - segment.start
        t = -self.signed_distance_to(segment.start) / span.dot_product(self.normal)
        if t < 0.0 or t > 1.0:
            return None
        return segment.start + t * span

    def __eq__(self, other):
        if not isinstance(other, Plane):
            return NotImplemented
        return self.normal == other.normal and self.d == other.d

    def __hash__(self):
        return hash((self.normal, self.d))

    def __repr__(self):
        return f"Plane(normal={self.normal}, root_point={self.root_point})"
