"""YAML/JSON document loading shared by the profile and attempt loaders."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_document(path: Path | str) -> Any:
    """Load a YAML or JSON document, detecting the format by suffix.

    Files with an unknown suffix are parsed as JSON when they look like JSON
    and as YAML otherwise. An empty document loads as an empty mapping.
    """
    doc_path = Path(path)
    if not doc_path.exists():
        raise FileNotFoundError(f"Document not found: {doc_path}")

    suffix = doc_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return _load_yaml(doc_path)
    if suffix == ".json":
        return _load_json(doc_path)
    return _load_unknown(doc_path)


def load_mapping(path: Path | str) -> dict:
    """Load a document that must be a mapping."""
    data = load_document(path)
    if not isinstance(data, dict):
        raise ValueError(f"Document must be a mapping/dict: {path}")
    return data


def _load_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML document: {path}") from e

    return {} if data is None else data


def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON document: {path}") from e


def _load_unknown(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    raw_stripped = raw.lstrip()

    # Try JSON first if it looks like JSON, otherwise fall back to YAML.
    if raw_stripped.startswith("{") or raw_stripped.startswith("["):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid document format: {path}") from e

    return {} if data is None else data
