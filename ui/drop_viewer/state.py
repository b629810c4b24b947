import streamlit as st
from typing import Any, Dict, List

from core.drop_view import DropViewController


CONTROLLER_KEY = "dv_controller"
SOURCE_KEY = "dv_controller_source"
TABLE_NONCE_KEY = "dv_table_nonce"

SEARCH_KEY = "dv_search"
CATEGORY_KEY = "dv_category"
SORT_KEY = "dv_sort"


def ensure_controller(records: List[Dict[str, Any]], *, source: str, default_sort: str) -> DropViewController:
    """Return the session's controller, building it once per data source."""
    ss = st.session_state
    ctrl = ss.get(CONTROLLER_KEY)
    if ctrl is None or ss.get(SOURCE_KEY) != source:
        ctrl = DropViewController(records, default_sort=default_sort)
        ss[CONTROLLER_KEY] = ctrl
        ss[SOURCE_KEY] = source
        for key in (SEARCH_KEY, CATEGORY_KEY, SORT_KEY):
            ss.pop(key, None)
        ss[TABLE_NONCE_KEY] = 0

    # Re-seed widget keys if they were pruned (e.g. a run that showed a load error)
    ss.setdefault(SEARCH_KEY, ctrl.search_text)
    ss.setdefault(CATEGORY_KEY, ctrl.category)
    ss.setdefault(SORT_KEY, ctrl.sort_key)
    ss.setdefault(TABLE_NONCE_KEY, 0)
    return ctrl


def get_controller() -> DropViewController:
    return st.session_state[CONTROLLER_KEY]


def table_key() -> str:
    return f"dv_table_{st.session_state.get(TABLE_NONCE_KEY, 0)}"


def _reset_table_selection() -> None:
    st.session_state[TABLE_NONCE_KEY] = st.session_state.get(TABLE_NONCE_KEY, 0) + 1


def on_search() -> None:
    get_controller().search(st.session_state.get(SEARCH_KEY) or "")
    _reset_table_selection()


def on_category() -> None:
    get_controller().apply_filters(st.session_state.get(CATEGORY_KEY) or "")
    _reset_table_selection()


def on_sort() -> None:
    get_controller().apply_sort(st.session_state.get(SORT_KEY))
    _reset_table_selection()


def on_reset() -> None:
    ctrl = get_controller()
    ctrl.reset()
    st.session_state[SEARCH_KEY] = ctrl.search_text
    st.session_state[CATEGORY_KEY] = ctrl.category
    st.session_state[SORT_KEY] = ctrl.sort_key
    _reset_table_selection()


def on_page(delta: int) -> None:
    if get_controller().change_page(delta):
        _reset_table_selection()


def on_close_detail() -> None:
    get_controller().close_detail()
    _reset_table_selection()
