"""Helpers for reading tree sources and reporting to stderr."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import yaml


def read_structured(path: Path) -> Any:
    """Load a YAML or JSON file; JSON is read through the YAML parser."""
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
