from __future__ import annotations

import streamlit as st

from core.drop_view import DropViewController
from ui.drop_viewer.labels import EMPTY_STATE, page_info
from ui.drop_viewer.state import on_page, table_key
from ui.drop_viewer.widgets import _render_selection_table


def render_results(ctrl: DropViewController) -> None:
    view = ctrl.render()

    if view.is_empty:
        st.info(EMPTY_STATE)
    else:
        picked = _render_selection_table(
            items=view.rows,
            key=table_key(),
            height=min(36 + 35 * len(view.rows), 640),
            column_order=["Type", "Name", "Best Monster", "Drop Rate"],
        )
        if picked and picked != ctrl.detail_name:
            ctrl.show_detail(picked)
        st.caption("Select a row to see every drop source for that item.")

    c_prev, c_info, c_next = st.columns([1, 3, 1], vertical_alignment="center")
    with c_prev:
        st.button(
            "◀ Previous",
            key="dv_prev_page",
            disabled=not view.has_prev,
            on_click=on_page,
            args=(-1,),
            width="stretch",
        )
    with c_info:
        st.markdown(
            f"<div style='text-align:center'>{page_info(view.current_page, view.total_pages)}"
            f" · showing {view.filtered_count} of {view.total_count}</div>",
            unsafe_allow_html=True,
        )
    with c_next:
        st.button(
            "Next ▶",
            key="dv_next_page",
            disabled=not view.has_next,
            on_click=on_page,
            args=(1,),
            width="stretch",
        )
