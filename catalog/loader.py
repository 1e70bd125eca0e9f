"""
Load the geographic catalog from per-state JSON documents.

Each ``<State Name>.json`` file in the data directory holds one state's
districts, sub-districts and villages. Files are validated against the
schema in ``catalog.models``; a file that cannot be read or does not
validate is logged and skipped, the rest of the catalog still loads.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Tuple

from pydantic import ValidationError

from catalog.errors import LoadFailure
from catalog.models import GeoCatalog, State, StateDocument

logger = logging.getLogger(__name__)


def parse_state(name: str, payload: Any) -> State:
    """Validate a raw payload into a State, raising LoadFailure if it does not fit."""
    try:
        document = StateDocument.model_validate(payload)
    except ValidationError as e:
        raise LoadFailure(name, f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e

    return State(name=name, districts=document.districts)


def build_catalog(payloads: Iterable[Tuple[str, Any]]) -> GeoCatalog:
    states = {}

    for name, payload in payloads:
        try:
            state = parse_state(name, payload)
        except LoadFailure as e:
            logger.error(e.message)
            continue

        if name in states:
            logger.warning("Duplicate state '%s', keeping first", name)
            continue
        states[name] = state

    return GeoCatalog(states)


def read_state_documents(data_dir: Path) -> Iterator[Tuple[str, Any]]:
    """
    Yield ``(state name, parsed JSON)`` for every ``*.json`` file, sorted by
    file name. Files that cannot be read or parsed are logged and skipped.
    """
    for path in sorted(data_dir.glob("*.json")):
        if not path.is_file():
            continue

        name = path.stem
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(LoadFailure(name, str(e)).message)
            continue

        yield name, payload


def load_catalog(data_dir) -> GeoCatalog:
    data_dir = Path(data_dir)

    if not data_dir.is_dir():
        logger.error("Data directory not found: %s", data_dir)
        return GeoCatalog()

    logger.info("Loading state data from: %s", data_dir)
    catalog = build_catalog(read_state_documents(data_dir))

    counts = catalog.counts()
    logger.info(
        "Loaded %d states, %d districts, %d sub-districts, %d villages",
        counts["states"], counts["districts"], counts["subDistricts"], counts["villages"],
    )
    return catalog
