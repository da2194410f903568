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

"""Exception types raised by the geometry primitives."""


class SpatialError(Exception):
    """Base class for all errors raised by euclid_spatial."""


class DegenerateGeometryError(SpatialError, ValueError):
    """
    Raised when a primitive's defining points coincide.

    A segment whose start equals its end has no direction, and a zero
    vector cannot be normalized. Neither is ever silently corrected.
    """


class ParseFailure(SpatialError, ValueError):
    """Raised when text cannot be read as a coordinate tuple."""

    def __init__(self, text, kind='coordinates'):
        self.text = text
        super().__init__(f"Could not parse {text!r} as {kind}")
