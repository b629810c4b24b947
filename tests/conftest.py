"""
Shared fixtures for the drop viewer tests.

Datasets are built in memory; tests that need a file on disk write one to
tmp_path so nothing depends on the repo's sample data.
"""

import json
import pytest


def make_record(i, *, type_="armor", best_monster=None, probability_value=None, drops=None):
    return {
        "name": f"Item {i:03d}",
        "type": type_,
        "bestMonster": best_monster if best_monster is not None else f"Monster {i:03d}",
        "bestProbability": f"1/{100 + i}",
        "probabilityValue": probability_value if probability_value is not None else 100 + i,
        "allDrops": drops if drops is not None else [
            {"monster": f"Monster {i:03d}", "probability": f"1/{100 + i}", "denominator": 100 + i},
        ],
    }


@pytest.fixture
def records_120():
    """120 records, three of which (indices 10, 60, 110) are weapons."""
    out = []
    for i in range(120):
        type_ = "weapon" if i in (10, 60, 110) else ("armor" if i % 2 else "helmet")
        out.append(make_record(i, type_=type_))
    return out


@pytest.fixture
def small_records():
    return [
        {
            "name": "Dragon Sword",
            "type": "weapon",
            "bestMonster": "Red Dragon",
            "bestProbability": "1/100",
            "probabilityValue": 100,
            "allDrops": [
                {"monster": "A", "probability": "1/500", "denominator": 500},
                {"monster": "B", "probability": "1/100", "denominator": 100},
            ],
        },
        {
            "name": "bone helmet",
            "type": "helmet",
            "bestMonster": "Skeleton",
            "bestProbability": "1/40",
            "probabilityValue": 40,
            "allDrops": [],
        },
        {
            "name": "Azure Ring",
            "type": "ring",
            "probabilityValue": 250,
            "allDrops": [],
        },
        {
            "name": "Dark Armor",
            "type": "armor",
            "bestMonster": "Dragon Knight",
            "bestProbability": "1/300",
            "probabilityValue": 300,
            "allDrops": [],
        },
    ]


@pytest.fixture
def data_file(tmp_path, small_records):
    path = tmp_path / "equipment_data.json"
    path.write_text(json.dumps(small_records), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep the developer's settings file and env vars out of the tests."""
    monkeypatch.delenv("DROP_VIEWER_DATA_SOURCE", raising=False)
    monkeypatch.delenv("DROP_VIEWER_PAGE_TITLE", raising=False)
    monkeypatch.setenv("DROP_VIEWER_SETTINGS_FILE", str(tmp_path / "no_settings.json"))
