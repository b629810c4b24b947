# ui/drop_viewer/render.py
from __future__ import annotations

import logging
from typing import Any, Dict

import streamlit as st

from core.drop_data import DataLoadError, category_options, resolve_data_source
from ui.drop_viewer.data_io import _load_records
from ui.drop_viewer.labels import md_escape
from ui.drop_viewer.panels.controls import render_controls
from ui.drop_viewer.panels.detail import render_detail
from ui.drop_viewer.panels.load_error import render_load_error
from ui.drop_viewer.panels.results import render_results
from ui.drop_viewer.state import ensure_controller

logger = logging.getLogger(__name__)


def render(settings: Dict[str, Any]) -> None:
    st.markdown(f"## {md_escape(settings.get('page_title') or 'Equipment Drop Viewer')}")

    source = resolve_data_source(settings.get("data_source"))

    with st.spinner("Loading equipment data..."):
        try:
            records = _load_records(source)
        except DataLoadError as err:
            logger.error("Data load error from %s: %s", err.source, err)
            render_load_error(err)
            return

    ctrl = ensure_controller(
        records,
        source=source,
        default_sort=settings.get("default_sort") or "name",
    )

    st.caption(f"{len(ctrl.all_data)} equipment records")

    render_controls(categories=category_options(ctrl.all_data))
    render_results(ctrl)
    render_detail(ctrl)

    st.markdown("---")
    st.caption(f"Data source: {source} · {len(ctrl.all_data)} records in total")
