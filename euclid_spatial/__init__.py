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
euclid_spatial - immutable 3D points, vectors, line segments and planes.

Text parsing accepts a permissive coordinate grammar (``"1,2,3"``,
``"(1; 2; 3)"``, ``"1,5 2,5 3,5"``) and segments round-trip through XML as
a StartPoint/EndPoint element pair.
"""

from .errors import DegenerateGeometryError, ParseFailure, SpatialError
from .line_segment import DOUBLE_PRECISION, SMALLEST_POSITIVE_DOUBLE, LineSegment, PlaneLike
from .plane import Plane
from .text import try_parse, try_parse_2d, try_parse_3d
from .vectors import Point3D, UnitVector3D, Vector3D

__all__ = [
    "DegenerateGeometryError",
    "ParseFailure",
    "SpatialError",
    "DOUBLE_PRECISION",
    "SMALLEST_POSITIVE_DOUBLE",
    "LineSegment",
    "PlaneLike",
    "Plane",
    "Point3D",
    "Vector3D",
    "UnitVector3D",
    "try_parse",
    "try_parse_2d",
    "try_parse_3d",
]
