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

"""Point3D, Vector3D and UnitVector3D - immutable 3D value types."""

import math

import numpy as np
from scipy.spatial.transform import Rotation

from .errors import DegenerateGeometryError, ParseFailure
from .text import try_parse_3d


def _frozen_array(values):
    array = np.array(values, dtype=float)
    if array.shape != (3,):
        raise ValueError("Expected a 3D coordinate [x, y, z]")
    array.setflags(write=False)
    return array


class _Coordinates:
    """Shared storage and accessors for the 3-component value types."""

    __slots__ = ('_xyz',)

    def __init__(self, x, y, z):
        self._xyz = _frozen_array([x, y, z])

    @classmethod
    def _from_array(cls, array):
        return cls(*np.asarray(array, dtype=float))

    @property
    def x(self):
        return float(self._xyz[0])

    @property
    def y(self):
        return float(self._xyz[1])

    @property
    def z(self):
        return float(self._xyz[2])

    def to_array(self):
        """Return a writable numpy copy of the coordinates."""
        return self._xyz.copy()

    def tolist(self):
        return self._xyz.tolist()

    def equals(self, other, tolerance):
        """Compare component-wise within an absolute tolerance."""
        if tolerance < 0:
            raise ValueError("tolerance must be non-negative")
        return bool(np.all(np.abs(self._xyz - other._xyz) <= tolerance))

    def __iter__(self):
        return iter(self.tolist())

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self.tolist()))

    def __repr__(self):
        return f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self):
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


class Point3D(_Coordinates):
    """A location in 3D Euclidean space."""

    __slots__ = ()

    @classmethod
    def origin(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def of(cls, value):
        """
        Coerce ``value`` to a Point3D.

        Args:
            value: A Point3D or a sequence [x, y, z]

        Raises
        ------
        ValueError
            If value is not a 3D point

        """
        if isinstance(value, Point3D):
            return value
        if isinstance(value, _Coordinates):
            raise ValueError(f"Expected a point, got {type(value).__name__}")
        return cls._from_array(_frozen_array(value))

    @classmethod
    def parse(cls, text):
        """
        Create a point from text such as ``"1, 2, 3"`` or ``"(1; 2; 3)"``.

        Raises
        ------
        ParseFailure
            If the text is not a coordinate triple

        """
        coordinates = try_parse_3d(text)
        if coordinates is None:
            raise ParseFailure(text, 'a 3D point')
        return cls(*coordinates)

    def vector_to(self, other):
        return other - self

    def distance_to(self, other):
        return math.hypot(*(other._xyz - self._xyz).tolist())

    def __sub__(self, other):
        if isinstance(other, Point3D):
            return Vector3D._from_array(self._xyz - other._xyz)
        if isinstance(other, Vector3D):
            return Point3D._from_array(self._xyz - other._xyz)
        return NotImplemented

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Point3D._from_array(self._xyz + other._xyz)
        return NotImplemented


class Vector3D(_Coordinates):
    """A displacement in 3D Euclidean space."""

    __slots__ = ()

    @classmethod
    def parse(cls, text):
        coordinates = try_parse_3d(text)
        if coordinates is None:
            raise ParseFailure(text, 'a 3D vector')
        return cls(*coordinates)

    @property
    def length(self):
        return math.hypot(*self.tolist())

    def dot_product(self, other):
        return float(np.dot(self._xyz, other._xyz))

    def cross_product(self, other):
        return Vector3D._from_array(np.cross(self._xyz, other._xyz))

    def normalize(self):
        """
        Return the unit vector pointing the same way.

        Raises
        ------
        DegenerateGeometryError
            If the vector has zero length

        """
        return UnitVector3D._from_array(self._xyz)

    def angle_to(self, other):
        """Angle between the two vectors in radians, in [0, pi]."""
        denominator = self.length * other.length
        if denominator == 0.0:
            raise DegenerateGeometryError("Angle to a zero vector is undefined")
        cosine = np.clip(self.dot_product(other) / denominator, -1.0, 1.0)
        return float(np.arccos(cosine))

    def __add__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D._from_array(self._xyz + other._xyz)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector3D):
            return Vector3D._from_array(self._xyz - other._xyz)
        return NotImplemented

    def __neg__(self):
        return Vector3D._from_array(-self._xyz)

    def __mul__(self, scalar):
        if isinstance(scalar, _Coordinates):
            return NotImplemented
        return Vector3D._from_array(self._xyz * float(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if isinstance(scalar, _Coordinates):
            return NotImplemented
        return Vector3D._from_array(self._xyz / float(scalar))


class UnitVector3D(Vector3D):
    """A Vector3D of length one. The constructor normalizes its input."""

    __slots__ = ()

    def __init__(self, x, y, z):
        raw = _frozen_array([x, y, z])
        norm = math.hypot(*raw.tolist())
        if norm == 0.0 or not np.isfinite(norm):
            raise DegenerateGeometryError("Cannot normalize a zero-length or non-finite vector")
        self._xyz = _frozen_array(raw / norm)

    @classmethod
    def x_axis(cls):
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_axis(cls):
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_axis(cls):
        return cls(0.0, 0.0, 1.0)

    @property
    def length(self):
        return 1.0

    def normalize(self):
        return self

    def __neg__(self):
        return UnitVector3D._from_array(-self._xyz)

    def is_parallel_to(self, other, tolerance=1e-10):
        """
        Check parallelism using the dot product.

        Anti-parallel directions count as parallel.

        Args:
            other: UnitVector3D to compare against
            tolerance: Allowed deviation of |u.v| from 1

        """
        other = other.normalize()
        return abs(1.0 - abs(self.dot_product(other))) <= tolerance

    def is_parallel_to_within_angle(self, other, angle_tolerance):
        """
        Check parallelism using the angle between the directions.

        Args:
            other: UnitVector3D to compare against
            angle_tolerance: Maximum angle in radians

        Returns
        -------
        bool
            True if the angle is below the tolerance or within the
            tolerance of pi (anti-parallel)

        """
        angle = self.angle_to(other)
        return angle < angle_tolerance or abs(np.pi - angle) < angle_tolerance

    def is_perpendicular_to(self, other, tolerance=1e-10):
        return abs(self.dot_product(other.normalize())) <= tolerance

    def rotate(self, about, angle):
        """
        Rotate this direction about an axis.

        Args:
            about: Rotation axis (normalized internally)
            angle: Rotation angle in radians, right-handed about ``about``

        Returns
        -------
        UnitVector3D
            The rotated direction

        """
        axis = about.normalize()
        rotation = Rotation.from_rotvec(angle * axis.to_array())
        return UnitVector3D._from_array(rotation.apply(self._xyz))
