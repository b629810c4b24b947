import streamlit as st
from typing import Any, Dict, List

from core.drop_data import load_equipment_data


@st.cache_data(show_spinner=False)
def _load_records(source: str) -> List[Dict[str, Any]]:
    # DataLoadError is not cached, so a rerun retries the load.
    return load_equipment_data(source)


def _reload_records() -> None:
    _load_records.clear()
