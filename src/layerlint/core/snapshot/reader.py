from __future__ import annotations

"""
Snapshot File Reader.

Loads an exported design document from disk. JSON files are decoded with
the standard library, YAML files with PyYAML's safe loader; files with
any other extension are tried as JSON first and YAML second.
"""

import json
import logging
import os
from typing import Any

import yaml

from layerlint.domain.errors import SnapshotError
from layerlint.infra.fs import read_text_file

logger = logging.getLogger(__name__)

_JSON_EXTENSIONS = {".json"}
_YAML_EXTENSIONS = {".yaml", ".yml"}


def read_snapshot(path: str) -> Any:
    """
    Read and decode a serialized document snapshot.

    Args:
        path: Snapshot file on disk.

    Returns:
        Any: The decoded record (normally a dictionary).

    Raises:
        SnapshotError: If the file is missing, unreadable or not decodable.
    """
    try:
        text = read_text_file(path)
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot '{path}': {e}") from e

    _, ext = os.path.splitext(path)
    ext = ext.lower()

    if ext in _JSON_EXTENSIONS:
        return _decode_json(text, path)
    if ext in _YAML_EXTENSIONS:
        return _decode_yaml(text, path)

    logger.debug(f"Unknown snapshot extension '{ext}', probing JSON then YAML.")
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return _decode_yaml(text, path)


def _decode_json(text: str, path: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in '{path}': {e}") from e


def _decode_yaml(text: str, path: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SnapshotError(f"Invalid YAML in '{path}': {e}") from e
