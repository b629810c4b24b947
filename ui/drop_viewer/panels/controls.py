from __future__ import annotations

from typing import List

import streamlit as st

from ui.drop_viewer.labels import SORT_OPTIONS, category_label, sort_label
from ui.drop_viewer.state import (
    CATEGORY_KEY,
    SEARCH_KEY,
    SORT_KEY,
    on_category,
    on_reset,
    on_search,
    on_sort,
)


def render_controls(*, categories: List[str]) -> None:
    """Search box, category filter, sort selector and reset button on one row."""

    options = [""] + list(categories)
    # A category can vanish if the data source changed under a live session
    if st.session_state.get(CATEGORY_KEY) not in options:
        st.session_state[CATEGORY_KEY] = ""

    c_search, c_cat, c_sort, c_reset = st.columns([3, 2, 2, 1], vertical_alignment="bottom")
    with c_search:
        st.text_input(
            "Search",
            placeholder="Equipment or monster name",
            key=SEARCH_KEY,
            on_change=on_search,
        )
    with c_cat:
        st.selectbox(
            "Category",
            options=options,
            format_func=category_label,
            key=CATEGORY_KEY,
            on_change=on_category,
        )
    with c_sort:
        st.selectbox(
            "Sort by",
            options=SORT_OPTIONS,
            format_func=sort_label,
            key=SORT_KEY,
            on_change=on_sort,
        )
    with c_reset:
        st.button("Reset", key="dv_reset", on_click=on_reset, width="stretch")
