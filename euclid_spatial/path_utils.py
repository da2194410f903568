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


"""File I/O utilities for loading YAML segment jobs and exporting JSON reports."""

import json
import logging
from datetime import datetime
from pathlib import Path

import yaml

from .line_segment import LineSegment
from .plane import Plane
from .segment_record import SegmentRecord
from .vectors import Point3D, Vector3D

logger = logging.getLogger(__name__)


def coerce_point(value, cls=Point3D):
    """
    Read a coordinate from a config value.

    Args:
        value: Coordinate text such as "1, 2, 3" or a list [x, y, z]
        cls: Point3D or Vector3D

    Raises
    ------
    ParseFailure
        If text does not parse
    ValueError
        If a list is not three numbers

    """
    if isinstance(value, str):
        return cls.parse(value)
    if isinstance(value, (list, tuple)) and len(value) == 3:
        return cls(*value)
    raise ValueError(f"Expected coordinate text or [x, y, z], got {value!r}")


def load_segment_job(yaml_path):
    """
    Load a segment analysis job from a YAML file.

    Parameters
    ----------
    yaml_path : str
        Path to the YAML configuration file.

    Returns
    -------
    tuple
        A tuple containing the following elements:
        - records : list
            List of SegmentRecord objects.
        - parameters : dict
            Analysis parameters with probe points converted to Point3D.
        - plane : Plane or None
            Reference plane, if the job defines one.

    Raises
    ------
    FileNotFoundError
        If the YAML file does not exist.
    ValueError
        If the YAML structure is invalid.

    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict):
        raise ValueError("Job file must contain a mapping")

    required_keys = ['segments', 'parameters']
    for key in required_keys:
        if key not in config:
            raise ValueError(f"Missing required key in YAML: '{key}'")

    if not isinstance(config['parameters'], dict):
        raise ValueError("'parameters' must be a mapping")

    required_params = ['clamp_to_segment', 'probe_points']
    for param in required_params:
        if param not in config['parameters']:
            raise ValueError(f"Missing required parameter: '{param}'")

    if not config['segments']:
        raise ValueError("No segments defined in configuration")
    if not isinstance(config['segments'], list):
        raise ValueError("'segments' must be a list")

    records = []
    names = set()
    for i, segment_dict in enumerate(config['segments']):
        if not isinstance(segment_dict, dict):
            raise ValueError(f"Segment {i} must be a mapping")
        if 'start' not in segment_dict or 'end' not in segment_dict:
            raise ValueError(f"Segment {i} missing 'start' or 'end'")

        name = str(segment_dict.get('name', f'segment_{i}'))
        if name in names:
            raise ValueError(f"Duplicate segment name: '{name}'")
        names.add(name)

        segment = LineSegment(coerce_point(segment_dict['start']), coerce_point(segment_dict['end']))
        records.append(SegmentRecord(name, segment))

    parameters = dict(config['parameters'])
    if not isinstance(parameters['probe_points'] or [], list):
        raise ValueError("'probe_points' must be a list")
    parameters['probe_points'] = [coerce_point(p) for p in parameters['probe_points'] or []]

    plane = None
    plane_info = config.get('plane')
    if plane_info is not None:
        if not isinstance(plane_info, dict):
            raise ValueError("Plane must be a mapping with 'root' and 'normal' keys")
        if 'root' not in plane_info or 'normal' not in plane_info:
            raise ValueError("Plane must have 'root' and 'normal' keys")
        plane = Plane(coerce_point(plane_info['normal'], Vector3D), coerce_point(plane_info['root']))

    logger.debug("Loaded %d segment(s) from %s", len(records), yaml_path)
    return records, parameters, plane


def export_to_json(records, output_path, parallel_pairs=None, metadata=None):
    """
    Export analyzed segments to a JSON file.

    Parameters
    ----------
    records : list
        List of SegmentRecord objects. Records must be analyzed before export.
    output_path : str
        Path where the JSON file will be written.
    parallel_pairs : list, optional
        Pairs of segment names found parallel to each other.
    metadata : dict, optional
        Optional metadata to include in the output file.

    Raises
    ------
    RuntimeError
        If any record has not been analyzed yet.

    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    for record in records:
        if not record.is_analyzed:
            raise RuntimeError(f"Segment '{record.name}' has not been analyzed yet - cannot export")

    data = {
        'metadata': {
            'generated_at': datetime.now().isoformat(),
            'num_segments': len(records),
            'total_length': sum(record.line_segment.length() for record in records)
        },
        'segments': {},
        'parallel_pairs': [list(pair) for pair in parallel_pairs or []]
    }

    if metadata:
        data['metadata'].update(metadata)

    for record in records:
        data['segments'][record.name] = record.to_dict()

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    logger.debug("Wrote report for %d segment(s) to %s", len(records), output_path)


def auto_generate_output_path(input_path):
    """
    Generate a timestamped output path next to the input file.

    The output directory will be ``<input dir>/generated/``.
    """
    input_path = Path(input_path)
    job_name = input_path.stem
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    output_dir = input_path.resolve().parent / "generated"
    output_dir.mkdir(parents=True, exist_ok=True)

    output_filename = f"{job_name}_{timestamp}.json"
    return output_dir / output_filename
