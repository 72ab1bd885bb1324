"""Decode redirect documents into ``RedirectRecord`` sequences.

Two formats share one shape, a list of ``{path, url}`` entries::

    # YAML
    - path: /urlshort
      url: https://github.com/gophercises/urlshort

    // JSON
    [{"path": "/urlshort", "url": "https://github.com/gophercises/urlshort"}]

Decoding is all-or-nothing: any problem raises ``RecordDecodeError``
and no records are returned. An empty document decodes to no records.
Unknown fields on an entry are ignored.
"""

import json as json_module
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from urlshort.errors import ConfigurationError, RecordDecodeError
from urlshort.records import RedirectRecord

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


def parse_yaml(document: str | bytes, *, source: str = "<yaml>") -> tuple[RedirectRecord, ...]:
    """Decode a YAML redirect document."""
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as exc:
        raise RecordDecodeError(f"invalid YAML: {exc}", source=source) from exc
    return records_from_data(data, source=source)


def parse_json(document: str | bytes, *, source: str = "<json>") -> tuple[RedirectRecord, ...]:
    """Decode a JSON redirect document."""
    if not document.strip():
        return ()
    try:
        data = json_module.loads(document)
    except ValueError as exc:
        raise RecordDecodeError(f"invalid JSON: {exc}", source=source) from exc
    return records_from_data(data, source=source)


def load_records(path: str | Path) -> tuple[RedirectRecord, ...]:
    """Read a redirect file, choosing the decoder by its suffix.

    Raises:
        ConfigurationError: The file is missing, unreadable, or has an
            unsupported suffix.
        RecordDecodeError: The file contents are malformed.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES and suffix not in JSON_SUFFIXES:
        msg = f"Unsupported redirect file {str(path)!r}: expected .yaml, .yml or .json"
        raise ConfigurationError(msg)
    try:
        document = path.read_bytes()
    except FileNotFoundError as exc:
        msg = f"Redirect file not found: {str(path)!r}"
        raise ConfigurationError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read redirect file {str(path)!r}: {exc.strerror}"
        raise ConfigurationError(msg) from exc

    if suffix in YAML_SUFFIXES:
        return parse_yaml(document, source=str(path))
    return parse_json(document, source=str(path))


def records_from_data(data: Any, *, source: str = "<input>") -> tuple[RedirectRecord, ...]:
    """Validate already-parsed data and convert it to records."""
    if data is None:
        return ()
    if not isinstance(data, list):
        msg = f"expected a list of redirect entries, got {type(data).__name__}"
        raise RecordDecodeError(msg, source=source)

    records: list[RedirectRecord] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, Mapping):
            msg = f"expected a mapping with 'path' and 'url', got {type(entry).__name__}"
            raise RecordDecodeError(msg, source=source, index=index)
        records.append(
            RedirectRecord(
                path=_text_field(entry, "path", source=source, index=index),
                url=_text_field(entry, "url", source=source, index=index),
            )
        )
    return tuple(records)


def _text_field(entry: Mapping[str, Any], name: str, *, source: str, index: int) -> str:
    if name not in entry:
        raise RecordDecodeError(f"missing {name!r}", source=source, index=index)
    value = entry[name]
    if not isinstance(value, str):
        msg = f"{name!r} must be a string, got {type(value).__name__}"
        raise RecordDecodeError(msg, source=source, index=index)
    return value
