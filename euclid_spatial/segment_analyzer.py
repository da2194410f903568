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


"""Segment analyzer - derives per-segment measurements for analysis reports."""

import logging

import numpy as np

from .errors import DegenerateGeometryError, SpatialError
from .vectors import Point3D

logger = logging.getLogger(__name__)


class SegmentAnalyzer:
    """
    Compute lengths, directions, probe projections and plane relations.

    Modifies SegmentRecord objects in-place following the Mutable State pattern.
    """

    def __init__(self, parameters):
        """
        Initialize analyzer with job parameters.

        Args:
            parameters : dict
                Dictionary with keys:
                - clamp_to_segment: Restrict probe projections to the segment
                - probe_points: Points to project onto every segment
                - angle_tolerance_deg: Optional parallelism tolerance in degrees;
                  omitted means only rounding-level deviation is accepted

        """
        self.clamp_to_segment = parameters['clamp_to_segment']
        self.probe_points = [Point3D.of(p) for p in parameters['probe_points']]

        angle_tolerance_deg = parameters.get('angle_tolerance_deg')
        if not isinstance(self.clamp_to_segment, bool):
            raise ValueError(f"clamp_to_segment must be true or false, got {self.clamp_to_segment!r}")
        if angle_tolerance_deg is None:
            self.angle_tolerance_rad = None
        elif isinstance(angle_tolerance_deg, bool) or not isinstance(angle_tolerance_deg, (int, float)):
            raise ValueError(f"angle_tolerance_deg must be a number, got {angle_tolerance_deg!r}")
        elif not (0 < angle_tolerance_deg < 90):
            raise ValueError(f"angle_tolerance_deg must be between 0 and 90, got {angle_tolerance_deg}")
        else:
            self.angle_tolerance_rad = float(np.radians(angle_tolerance_deg))

    def analyze(self, record, plane=None):
        """
        Analyze a record.

        Sets record.results and record.is_analyzed.

        Args:
            record : SegmentRecord
                Record to process
            plane : Plane, optional
                Reference plane for projection and intersection

        Returns
        -------
        bool
            True if successful, False otherwise

        """
        try:
            line = record.line_segment

            results = {
                'length': line.length(),
                'direction': line.direction().tolist(),
                'midpoint': line.midpoint().tolist(),
                'probes': [self._probe(line, point) for point in self.probe_points],
            }
            if plane is not None:
                results['plane'] = self._plane_relation(line, plane)

            record.results = results
            record.is_analyzed = True
            return True

        except SpatialError as e:
            logger.error("Error analyzing segment '%s': %s", record.name, e)
            record.is_analyzed = False
            return False

    def parallel_pairs(self, records):
        """
        Find every pair of records whose segments are parallel.

        Returns
        -------
        list
            Tuples of record names, in record order

        """
        pairs = []
        for i, first in enumerate(records):
            for second in records[i + 1:]:
                if first.line_segment.is_parallel_to(second.line_segment, self.angle_tolerance_rad):
                    pairs.append((first.name, second.name))
        return pairs

    def _probe(self, line, point):
        closest = line.closest_point_to(point, self.clamp_to_segment)
        return {
            'point': point.tolist(),
            'closest_point': closest.tolist(),
            'distance': closest.distance_to(point),
        }

    def _plane_relation(self, line, plane):
        try:
            projection = line.project_on(plane).to_dict()
        except DegenerateGeometryError:
            # Perpendicular to the plane: the projection collapses to a point
            projection = None

        intersection = line.intersection_with(plane)
        return {
            'signed_distance_start': plane.signed_distance_to(line.start),
            'signed_distance_end': plane.signed_distance_to(line.end),
            'projection': projection,
            'intersection': None if intersection is None else intersection.tolist(),
        }
