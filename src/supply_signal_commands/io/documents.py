"""Read and atomically persist YAML/JSON configuration documents."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

import yaml

from supply_signal_commands.constants.config import JSON_SUFFIXES


def is_json_path(path: Path) -> bool:
    return path.suffix.lower() in JSON_SUFFIXES


def load_document(path: Path) -> object:
    """Parse a document from disk. YAML is a superset of JSON, so one parser reads both."""
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def dump_document(payload: object, *, as_json: bool) -> str:
    """Serialize a document, preserving key order."""
    if as_json:
        return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True, default_flow_style=False)


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str = ".tmp-",
    temp_suffix: str = ".part",
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def write_document_atomic(path: Path, payload: object) -> None:
    """Serialize ``payload`` in the format implied by the file suffix and write it atomically.

    Serialization happens before any file is created, so an unserializable
    payload leaves nothing behind.
    """
    content = dump_document(payload, as_json=is_json_path(path))
    write_text_atomic(path=path, content=content)
