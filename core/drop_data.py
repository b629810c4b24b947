"""Equipment drop dataset loader.

The dataset is a single JSON array of equipment records:

[
  {
    "name": "Dragon Sword",
    "type": "weapon",
    "bestMonster": "Red Dragon",
    "bestProbability": "1/100",
    "probabilityValue": 100,
    "allDrops": [
      { "monster": "Red Dragon", "probability": "1/100", "denominator": 100 }
    ]
  }
]

A source is either a served origin (http/https URL, fetched with `requests`)
or a local file (plain path or file:// URL). Every failure is reported as a
single `DataLoadError`; the caller decides how to present it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, TypedDict
from urllib.parse import unquote, urlparse

import requests

DATA_FILENAME = "equipment_data.json"

SERVED_SCHEMES = ("http", "https")

logger = logging.getLogger(__name__)


class DropEntry(TypedDict):
    monster: str
    probability: str        # display form, e.g. "1/500"
    denominator: float      # smaller = more likely


class EquipmentRecord(TypedDict, total=False):
    name: str
    type: str
    bestMonster: str
    bestProbability: str
    probabilityValue: float
    allDrops: List[DropEntry]


class DataLoadError(Exception):
    """The dataset could not be fetched, read or parsed."""

    def __init__(self, message: str, *, source: str, is_file_source: bool):
        super().__init__(message)
        self.source = source
        self.is_file_source = is_file_source


def source_scheme(source: str) -> str:
    scheme = urlparse(str(source)).scheme.lower()
    # Windows drive letters ("C:\\data") parse as one-letter schemes
    if len(scheme) <= 1:
        return "file"
    return scheme


def is_file_source(source: str) -> bool:
    return source_scheme(source) not in SERVED_SCHEMES


def _local_path(source: str) -> Path:
    parsed = urlparse(str(source))
    if parsed.scheme.lower() == "file":
        return Path(unquote(parsed.path))
    return Path(source)


def resolve_data_source(configured: Optional[str] = None) -> str:
    """Pick the data source to load.

    A configured value (URL or path) is used as-is so a bad setting fails the
    load instead of falling back to another file. With nothing configured the
    first existing candidate file wins, else the bare filename.
    """
    if configured:
        return configured

    candidates = [
        Path("data") / DATA_FILENAME,
        Path(DATA_FILENAME),
    ]
    for p in candidates:
        if p.exists():
            return str(p)
    return DATA_FILENAME


def _fetch_text(source: str) -> str:
    resp = requests.get(source)
    if not resp.ok:
        raise DataLoadError(
            f"Data load failed: HTTP {resp.status_code} from {source}",
            source=source,
            is_file_source=False,
        )
    return resp.text


def _read_text(source: str) -> str:
    path = _local_path(source)
    with path.open("r", encoding="utf-8") as f:
        return f.read()


def load_equipment_data(source: str) -> List[EquipmentRecord]:
    """Load the dataset once from `source`.

    Raises DataLoadError on network failure, non-success status, unreadable
    file, invalid JSON or a top-level value that is not a list.
    """
    file_src = is_file_source(source)
    logger.info("Loading equipment data from %s", source)

    try:
        text = _read_text(source) if file_src else _fetch_text(source)
        data: Any = json.loads(text)
    except DataLoadError:
        raise
    except (OSError, requests.RequestException, ValueError) as exc:
        raise DataLoadError(
            f"Data load failed: {exc}",
            source=source,
            is_file_source=file_src,
        ) from exc

    if not isinstance(data, list):
        raise DataLoadError(
            f"Expected JSON list in {source}, got {type(data).__name__}",
            source=source,
            is_file_source=file_src,
        )

    logger.info("Loaded %d equipment records from %s", len(data), source)
    return data


def category_options(records: List[Dict[str, Any]]) -> List[str]:
    return sorted({str(r.get("type") or "") for r in records} - {""})
