"""Shared fixtures for job-file based tests."""

from __future__ import annotations

import textwrap

import pytest

JOB_YAML = """
segments:
  - name: girder
    start: "0, 0, 0"
    end: "(10; 0; 0)"
  - name: purlin
    start: "0 5 2"
    end: "-4,5 5 2"
  - name: post
    start: [10, 0, 0]
    end: [10, 0, 4]

parameters:
  clamp_to_segment: true
  angle_tolerance_deg: 0.5
  probe_points:
    - "5, 5, 0"
    - "15, 0, 0"

plane:
  root: "0, 0, 1"
  normal: "0, 0, 1"
"""


@pytest.fixture
def write_job(tmp_path):
    """Return a helper writing YAML text to a job file under tmp_path."""

    def _write(text=JOB_YAML, name="job.yaml"):
        path = tmp_path / name
        path.write_text(textwrap.dedent(text))
        return path

    return _write
