"""
Engine card component (read-only).
"""
from __future__ import annotations

import streamlit as st
from domain.models import EngineConfiguration


def engine_card(engine: EngineConfiguration) -> None:
    with st.expander(str(engine), expanded=False):
        c1, c2, c3 = st.columns([2, 2, 2])
        with c1:
            st.subheader("Protocol")
            st.markdown(f"**{engine.protocol or '?'}**")
        with c2:
            st.subheader("Restart")
            st.markdown(engine.restart_mode.value)
        with c3:
            st.subheader("Variants")
            st.markdown(", ".join(engine.variants) or "-")

        st.caption(f"Command: {engine.command}")
        if engine.working_directory:
            st.caption(f"Working directory: {engine.working_directory}")
        if engine.white_eval_pov:
            st.caption("Scores reported from White's point of view")

        if engine.init_strings:
            st.subheader("Init strings")
            st.code("\n".join(engine.init_strings), language="text")

        if engine.options:
            st.subheader("Options")
            st.table([
                {"name": o.name, "type": o.type_name, "value": o.value, "default": o.default_value}
                for o in engine.options
            ])
