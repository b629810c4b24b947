from __future__ import annotations

import streamlit as st

from core.drop_data import DATA_FILENAME, DataLoadError
from ui.drop_viewer.data_io import _reload_records
from ui.drop_viewer.labels import (
    FILE_SOURCE_REASON,
    FILE_SOURCE_STEPS,
    LOAD_FAILED_TITLE,
    SERVED_SOURCE_CHECKLIST,
)


def render_load_error(err: DataLoadError) -> None:
    st.error(f"{LOAD_FAILED_TITLE}: {err}")

    if err.is_file_source:
        st.markdown(FILE_SOURCE_REASON.format(filename=DATA_FILENAME))
        st.markdown(FILE_SOURCE_STEPS.format(filename=DATA_FILENAME))
        return

    st.markdown(SERVED_SOURCE_CHECKLIST.format(filename=DATA_FILENAME, source=err.source))
    st.button("Reload", key="dv_reload", on_click=_reload_records)
