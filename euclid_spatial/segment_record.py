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

"""SegmentRecord - Named segment with its analysis results."""


class SegmentRecord:
    """
    Represent one segment of an analysis job.

    Wraps a LineSegment for geometry and holds the results produced by
    SegmentAnalyzer.
    """

    def __init__(self, name, line_segment):
        """
        Initialize record.

        Args:
            name : str
                Identifier used as the key in exported reports
            line_segment : LineSegment
                Geometry of the record

        """
        self.name = name
        self.line_segment = line_segment
        self.results = None
        self.is_analyzed = False

    def to_dict(self):
        """
        Convert record to dictionary for JSON export.

        Returns
        -------
        dict
            Dictionary with the segment endpoints and analysis results

        Raises
        ------
        RuntimeError
            If the record has not been analyzed yet

        """
        if not self.is_analyzed:
            raise RuntimeError(f"Cannot export segment '{self.name}' - not analyzed yet")

        data = self.line_segment.to_dict()
        data.update(self.results)
        return data

    def __repr__(self):
        """Return string representation of record."""
        status = "analyzed" if self.is_analyzed else "not analyzed"
        return f"SegmentRecord({self.name!r}, length={self.line_segment.length():.3f}, {status})"
