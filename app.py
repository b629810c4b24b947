# app.py
import logging

import streamlit as st

from ui.drop_viewer.render import render as drop_viewer_render
from core.settings_manager import load_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

settings = load_settings()

st.set_page_config(
    page_title=settings["page_title"],
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown("""
    <style>
    /* Dark background with a gold accent, like an in-game item window */
    .stApp {
        background: radial-gradient(circle at top, #222 0, #000 60%);
        color: #e0d6b5;
    }

    h2, h4 {
        color: #c28f2c !important;
    }

    /* Selected table row and primary buttons pick up the accent colour */
    .stButton button:not(:disabled):hover {
        border-color: #c28f2c !important;
        color: #f5e9c8 !important;
    }

    /* Detail panel */
    div[data-testid="stVerticalBlockBorderWrapper"] {
        background-color: #111 !important;
        border-color: #333 !important;
    }
    </style>
""", unsafe_allow_html=True)

# --- Initialize Settings ---
if "user_settings" not in st.session_state:
    st.session_state.user_settings = settings

drop_viewer_render(st.session_state.user_settings)
