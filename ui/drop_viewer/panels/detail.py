from __future__ import annotations

import pandas as pd
import streamlit as st

from core.drop_view import DropViewController
from ui.drop_viewer.labels import md_escape
from ui.drop_viewer.state import on_close_detail
from ui.drop_viewer.tables import _rows_for_drops


def render_detail(ctrl: DropViewController) -> None:
    detail = ctrl.detail_view()
    if detail is None:
        return

    with st.container(border=True):
        head, close = st.columns([5, 1], vertical_alignment="center")
        with head:
            st.subheader(f"{md_escape(detail.name)} - Details")
        with close:
            st.button("✕ Close", key="dv_close_detail", on_click=on_close_detail, width="stretch")

        st.markdown(f"**Type:** {md_escape(detail.type)}")
        st.markdown(f"**Best drop:** {md_escape(detail.best_drop)}")

        st.markdown(f"#### All drop sources ({len(detail.drops)} monsters)")
        if not detail.drops:
            st.caption("No drop sources recorded.")
            return
        st.dataframe(
            pd.DataFrame(_rows_for_drops(detail.drops)),
            hide_index=True,
            width="stretch",
        )
