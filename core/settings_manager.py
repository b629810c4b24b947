import json
import logging
import os
from copy import deepcopy
from pathlib import Path

from core.drop_view import DEFAULT_SORT_KEY, SELECTABLE_SORT_KEYS

SETTINGS_FILE = Path("data/viewer_settings.json")

DEFAULT_SETTINGS = {
    "page_title": "Equipment Drop Viewer",
    # Local path, file:// URL or http(s) URL; None looks in data/ then the cwd
    "data_source": None,
    "default_sort": DEFAULT_SORT_KEY,
}

ENV_OVERRIDES = {
    "DROP_VIEWER_DATA_SOURCE": "data_source",
    "DROP_VIEWER_PAGE_TITLE": "page_title",
}

logger = logging.getLogger(__name__)


def _settings_file() -> Path:
    override = os.getenv("DROP_VIEWER_SETTINGS_FILE")
    return Path(override) if override else SETTINGS_FILE


def load_settings():
    """Load viewer settings: defaults, then the settings file, then env vars."""
    merged = deepcopy(DEFAULT_SETTINGS)
    path = _settings_file()

    loaded = {}
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
            loaded = {}

    if not isinstance(loaded, dict):
        loaded = {}

    for k, v in loaded.items():
        if k in merged and v is not None:
            merged[k] = v

    for env_key, setting in ENV_OVERRIDES.items():
        v = os.getenv(env_key)
        if v:
            merged[setting] = v

    if merged.get("default_sort") not in SELECTABLE_SORT_KEYS:
        merged["default_sort"] = DEFAULT_SORT_KEY

    return merged
