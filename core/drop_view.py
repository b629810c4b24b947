"""Search, category filter, sort and pagination over the loaded drop records.

Everything here is plain Python over lists of dicts. `DropViewController`
holds the per-session view state; the Streamlit layer only reads it back
through `render()` and `show_detail()`.
"""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

ITEMS_PER_PAGE = 50

DEFAULT_SORT_KEY = "name"

# "probability" is the selector value; sort_records also accepts the
# record field name "probabilityValue".
SELECTABLE_SORT_KEYS = ("name", "type", "probability")

UNKNOWN_MONSTER = "Unknown"
NO_PROBABILITY = "-"


def _text(record: Dict[str, Any], field_name: str) -> str:
    v = record.get(field_name)
    return "" if v is None else str(v)


def _collation_key(s: str):
    return (unicodedata.normalize("NFKC", s).casefold(), s)


def _number(v: Any) -> float:
    # Missing or non-numeric values sort after every real number
    try:
        f = float(v)
    except (TypeError, ValueError):
        return math.inf
    return math.inf if math.isnan(f) else f


def search_records(records: List[Dict[str, Any]], keyword: str) -> List[Dict[str, Any]]:
    q = (keyword or "").strip().lower()
    if not q:
        return list(records)
    out: List[Dict[str, Any]] = []
    for it in records:
        if q in _text(it, "name").lower():
            out.append(it)
            continue
        best = it.get("bestMonster")
        if best and q in str(best).lower():
            out.append(it)
    return out


def filter_by_category(records: List[Dict[str, Any]], category: Optional[str]) -> List[Dict[str, Any]]:
    if not category:
        return list(records)
    return [it for it in records if it.get("type") == category]


def sort_records(records: List[Dict[str, Any]], key: Optional[str]) -> None:
    """Sort `records` in place. Unknown keys leave the order untouched."""
    if key == "name":
        records.sort(key=lambda it: _collation_key(_text(it, "name")))
    elif key == "type":
        records.sort(key=lambda it: _collation_key(_text(it, "type")))
    elif key in ("probability", "probabilityValue"):
        records.sort(key=lambda it: _number(it.get("probabilityValue")))


def total_pages(count: int, per_page: int = ITEMS_PER_PAGE) -> int:
    return math.ceil(count / per_page)


def page_slice(records: List[Dict[str, Any]], page: int, per_page: int = ITEMS_PER_PAGE) -> List[Dict[str, Any]]:
    start = (page - 1) * per_page
    return records[start:start + per_page]


def find_record(records: List[Dict[str, Any]], name: str) -> Optional[Dict[str, Any]]:
    for it in records:
        if it.get("name") == name:
            return it
    return None


@dataclass(frozen=True)
class RankedDrop:
    rank: int
    monster: str
    probability: str


def sorted_drops(record: Dict[str, Any]) -> List[RankedDrop]:
    drops = [d for d in (record.get("allDrops") or []) if isinstance(d, dict)]
    drops = sorted(drops, key=lambda d: _number(d.get("denominator")))
    return [
        RankedDrop(
            rank=i + 1,
            monster=_text(d, "monster") or UNKNOWN_MONSTER,
            probability=_text(d, "probability") or NO_PROBABILITY,
        )
        for i, d in enumerate(drops)
    ]


def best_drop_summary(record: Dict[str, Any]) -> str:
    monster = _text(record, "bestMonster") or UNKNOWN_MONSTER
    prob = _text(record, "bestProbability") or NO_PROBABILITY
    return f"{monster} ({prob})"


@dataclass(frozen=True)
class PageView:
    rows: List[Dict[str, Any]]
    current_page: int
    total_pages: int
    filtered_count: int
    total_count: int

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def has_prev(self) -> bool:
        return self.current_page != 1

    @property
    def has_next(self) -> bool:
        return self.current_page != self.total_pages and self.total_pages != 0


@dataclass(frozen=True)
class DetailView:
    name: str
    type: str
    best_drop: str
    drops: List[RankedDrop] = field(default_factory=list)


class DropViewController:
    """Owns the loaded dataset and the current filtered/sorted/paged view."""

    items_per_page = ITEMS_PER_PAGE

    def __init__(self, records: List[Dict[str, Any]], *, default_sort: str = DEFAULT_SORT_KEY):
        self.all_data: List[Dict[str, Any]] = list(records)
        self.filtered_data: List[Dict[str, Any]] = list(self.all_data)
        self.current_page = 1
        self.default_sort = default_sort if default_sort in SELECTABLE_SORT_KEYS else DEFAULT_SORT_KEY

        # Control values
        self.search_text = ""
        self.category = ""
        self.sort_key = self.default_sort
        self.detail_name: Optional[str] = None

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered_data), self.items_per_page)

    def search(self, keyword: str) -> None:
        self.search_text = keyword or ""
        if not self.search_text.strip():
            self.apply_filters()
            return
        self.filtered_data = search_records(self.all_data, self.search_text)
        self.current_page = 1

    def apply_filters(self, category: Optional[str] = None) -> None:
        # Replaces any search result; the two do not compose.
        if category is not None:
            self.category = category
        self.filtered_data = filter_by_category(self.all_data, self.category)
        self.current_page = 1

    def apply_sort(self, key: Optional[str] = None) -> None:
        if key is not None:
            self.sort_key = key
        sort_records(self.filtered_data, self.sort_key)

    def reset(self) -> None:
        self.search_text = ""
        self.category = ""
        self.sort_key = self.default_sort
        self.filtered_data = list(self.all_data)
        self.current_page = 1
        self.detail_name = None

    def change_page(self, delta: int) -> bool:
        new_page = self.current_page + delta
        if 1 <= new_page <= self.total_pages:
            self.current_page = new_page
            return True
        return False

    def render(self) -> PageView:
        return PageView(
            rows=page_slice(self.filtered_data, self.current_page, self.items_per_page),
            current_page=self.current_page,
            total_pages=self.total_pages,
            filtered_count=len(self.filtered_data),
            total_count=len(self.all_data),
        )

    def show_detail(self, name: str) -> Optional[DetailView]:
        item = find_record(self.all_data, name)
        if item is None:
            return None
        self.detail_name = name
        return self.detail_view()

    def detail_view(self) -> Optional[DetailView]:
        if self.detail_name is None:
            return None
        item = find_record(self.all_data, self.detail_name)
        if item is None:
            return None
        return DetailView(
            name=_text(item, "name"),
            type=_text(item, "type"),
            best_drop=best_drop_summary(item),
            drops=sorted_drops(item),
        )

    def close_detail(self) -> None:
        self.detail_name = None
