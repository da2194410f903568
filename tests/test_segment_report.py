"""End-to-end tests for the segment_report command line tool."""

from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from euclid_spatial import path_utils
from euclid_spatial.line_segment import LineSegment
from euclid_spatial.segment_report import main
from euclid_spatial.xml_io import read_segment_file


def test_report_is_written(write_job, tmp_path) -> None:
    output = tmp_path / "report.json"

    assert main(["--input", str(write_job()), "--output", str(output)]) == 0

    data = json.loads(output.read_text())
    assert set(data['segments']) == {'girder', 'purlin', 'post'}
    assert data['metadata']['num_segments'] == 3
    assert data['metadata']['angle_tolerance_deg'] == 0.5
    assert data['parallel_pairs'] == [['girder', 'purlin']]
    assert data['segments']['post']['plane']['intersection'] == [10.0, 0.0, 1.0]


def test_xml_documents_are_written(write_job, tmp_path) -> None:
    xml_dir = tmp_path / "xml"

    assert main([
        "--input", str(write_job()),
        "--output", str(tmp_path / "report.json"),
        "--xml", str(xml_dir),
        "--verbose",
    ]) == 0

    assert read_segment_file(xml_dir / "girder.xml") == LineSegment((0, 0, 0), (10, 0, 0))
    assert sorted(p.name for p in xml_dir.iterdir()) == ["girder.xml", "post.xml", "purlin.xml"]


def test_default_output_path(write_job, tmp_path) -> None:
    assert main(["--input", str(write_job())]) == 0
    reports = list((tmp_path / "generated").glob("job_*.json"))
    assert len(reports) == 1


def test_missing_input_fails(tmp_path) -> None:
    assert main(["--input", str(tmp_path / "missing.yaml")]) == 1


def test_invalid_job_fails(write_job, tmp_path) -> None:
    job = write_job("segments: [{start: '0,0', end: '1,1,1'}]\n"
                    "parameters: {clamp_to_segment: true, probe_points: []}\n")
    assert main(["--input", str(job), "--output", str(tmp_path / "r.json")]) == 1
    assert not (tmp_path / "r.json").exists()


def test_non_numeric_angle_tolerance_fails(write_job, tmp_path) -> None:
    job = write_job("segments: [{start: '0,0,0', end: '1,1,1'}]\n"
                    "parameters: {clamp_to_segment: true, probe_points: [], angle_tolerance_deg: half}\n")
    assert main(["--input", str(job), "--output", str(tmp_path / "r.json")]) == 1
    assert not (tmp_path / "r.json").exists()


def test_non_mapping_plane_fails(write_job, tmp_path) -> None:
    job = write_job("segments: [{start: '0,0,0', end: '1,1,1'}]\n"
                    "parameters: {clamp_to_segment: true, probe_points: []}\n"
                    "plane: [0, 0, 1]\n")
    assert main(["--input", str(job), "--output", str(tmp_path / "r.json")]) == 1


def test_unexpected_errors_exit_with_failure(write_job, tmp_path, monkeypatch) -> None:
    def _explode(*args, **kwargs):
        raise TypeError("unexpected")

    monkeypatch.setattr(path_utils, "export_to_json", _explode)
    assert main(["--input", str(write_job()), "--output", str(tmp_path / "r.json")]) == 1
