from typing import Any, Dict, List

from core.drop_view import NO_PROBABILITY, UNKNOWN_MONSTER, RankedDrop


def _rows_for_table(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for it in items:
        rows.append(
            {
                "Type": str(it.get("type") or ""),
                "Name": str(it.get("name") or ""),
                "Best Monster": str(it.get("bestMonster") or UNKNOWN_MONSTER),
                "Drop Rate": str(it.get("bestProbability") or NO_PROBABILITY),
            }
        )
    return rows


def _rows_for_drops(drops: List[RankedDrop]) -> List[Dict[str, Any]]:
    return [
        {"#": d.rank, "Monster": d.monster, "Drop Rate": d.probability}
        for d in drops
    ]
