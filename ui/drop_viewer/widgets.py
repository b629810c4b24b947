import streamlit as st
import pandas as pd
from typing import Any, Dict, List, Optional
from ui.drop_viewer.tables import _rows_for_table


def _render_selection_table(
    *,
    items: List[Dict[str, Any]],
    key: str,
    height: Optional[int] = 420,
    column_order: Optional[List[str]] = None,
) -> Optional[str]:
    """Render `items` as a single-row-select table; return the picked item's name."""
    df = pd.DataFrame(_rows_for_table(items))

    kwargs: Dict[str, Any] = {
        "hide_index": True,
        "width": "stretch",
        "on_select": "rerun",
        "selection_mode": "single-row",
    }

    if height is not None:
        kwargs["height"] = int(height)

    if column_order:
        kwargs["column_order"] = [c for c in column_order if c in df.columns]

    event = st.dataframe(df, key=key, **kwargs)

    picked = list(getattr(getattr(event, "selection", None), "rows", None) or [])
    if not picked:
        return None
    idx = int(picked[0])
    if not 0 <= idx < len(items):
        return None
    return str(items[idx].get("name") or "")
