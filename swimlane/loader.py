"""
Event loading from YAML/JSON documents.

Accepted document shapes:

    - {id: 1, start: 2021-01-14, end: 2021-01-22, name: "Kickoff"}
    - ...

or a mapping with the list under "events". "start_date"/"end_date" are
accepted as aliases for "start"/"end". Unknown keys are ignored.
"""

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from swimlane.models import Event

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}

_KEY_ALIASES = {
    "id": "id",
    "name": "name",
    "start": "start_date",
    "start_date": "start_date",
    "end": "end_date",
    "end_date": "end_date",
}


class EventLoadError(ValueError):
    """Raised when an event source cannot be turned into events."""

    pass


def _normalize_record(record: Mapping[str, Any]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key, value in record.items():
        target = _KEY_ALIASES.get(str(key).lower())
        if target is None:
            continue
        if target in fields:
            raise EventLoadError(f"duplicate field '{target}' (via '{key}')")
        fields[target] = value
    return fields


def events_from_records(records: Iterable[Mapping[str, Any]]) -> list[Event]:
    """
    Build events from raw mappings.

    Raises:
        EventLoadError: Naming the index of the first invalid record
    """
    events = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise EventLoadError(f"record {index}: expected a mapping, got {type(record).__name__}")
        try:
            events.append(Event(**_normalize_record(record)))
        except EventLoadError as exc:
            raise EventLoadError(f"record {index}: {exc}") from exc
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
                for err in exc.errors()
            )
            raise EventLoadError(f"record {index}: {problems}") from exc
    return events


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    if suffix in _JSON_SUFFIXES:
        return json.loads(text)
    raise EventLoadError(f"unsupported event file type '{suffix}' ({path})")


def load_events(path: str | Path) -> list[Event]:
    """
    Load events from a YAML or JSON file.

    Args:
        path: File ending in .yaml, .yml or .json

    Returns:
        Events in file order

    Raises:
        EventLoadError: If the file is missing, unparseable, or malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise EventLoadError(f"cannot read {path}: {exc}") from exc

    try:
        document = _parse(path, text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise EventLoadError(f"cannot parse {path}: {exc}") from exc

    if isinstance(document, Mapping):
        if "events" not in document:
            raise EventLoadError(f"{path}: mapping has no 'events' key")
        document = document["events"]
    if document is None:
        document = []
    if not isinstance(document, list):
        raise EventLoadError(f"{path}: expected a list of events or a mapping with 'events'")

    events = events_from_records(document)
    logger.info("Loaded %d events from %s", len(events), path)
    return events
