"""
Chess Engine Configurations - Main Application Entry Point

Thin Streamlit viewer over the stored engine list. Editing happens elsewhere;
all model logic lives in domain/ and persistence in services/.
"""

import logging

import streamlit as st

from components.engine_card import engine_card
from services.repository import EngineRepository

logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="♞ Engine Configurations",
    page_icon="♞",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def main():
    """Main application entry point"""
    st.title("♞ Engine Configurations")
    repo = EngineRepository()
    diagnostics = []
    engines = repo.load_engines(diagnostics)

    if not engines:
        st.info(f"No engines configured yet. Add entries to `{repo.engines_file}`.")
        return

    st.caption(f"Loaded {len(engines)} engines")
    for engine in engines:
        engine_card(engine)

    if diagnostics:
        with st.expander(f"⚠️ {len(diagnostics)} entries skipped while loading", expanded=False):
            for msg in diagnostics:
                st.write(f"- {msg}")


if __name__ == "__main__":
    main()
