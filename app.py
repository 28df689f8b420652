"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later
"""

from __future__ import annotations

import streamlit as st
from streamlit.logger import get_logger

from services.editor_service import SessionEditor
from services.planner_presenter import build_segments_frame, format_duration_hours
from services.serialization import dumps_session, loads_session
from utils.config import load_config
from utils.formatting import fmt_ep, fmt_eph, fmt_km, fmt_m, set_locale

logger = get_logger(__name__)


def _editor() -> SessionEditor:
    cfg = st.session_state["app_config"]
    if "editor" not in st.session_state:
        st.session_state["editor"] = SessionEditor(
            global_start_time=cfg.default_start_time,
            default_eph=cfg.default_target_eph,
        )
    return st.session_state["editor"]


def _on_start_change() -> None:
    _editor().set_start_time(st.session_state["start-time"])


def _on_field_change(index: int, field_name: str, key: str) -> None:
    _editor().update_field(index, field_name, st.session_state[key])


def _on_end_change(index: int, key: str) -> None:
    _editor().set_end_time(index, st.session_state[key])


def _render_segment_row(editor: SessionEditor, index: int) -> None:
    seg = editor.segments[index]
    cols = st.columns([1, 2, 1, 1, 1, 1, 1])
    key = f"seg-{seg.id}"
    cols[0].text_input(
        "Name", value=seg.name, key=f"{key}-name",
        on_change=_on_field_change, args=(index, "name", f"{key}-name"),
    )
    cols[1].text_input(
        "Description", value=seg.description, key=f"{key}-description",
        on_change=_on_field_change, args=(index, "description", f"{key}-description"),
    )
    # Widgets are keyed by the derived value so recalculated times always show
    end_key = f"{key}-end-{seg.end_time}"
    cols[2].text_input(
        "End", value=seg.end_time, key=end_key,
        on_change=_on_end_change, args=(index, end_key),
    )
    cols[3].text_input(
        "Dist (km)", value=str(seg.split_dist_km), key=f"{key}-dist",
        on_change=_on_field_change, args=(index, "split_dist_km", f"{key}-dist"),
    )
    cols[4].text_input(
        "Elev (m)", value=str(seg.split_elev_m), key=f"{key}-elev",
        on_change=_on_field_change, args=(index, "split_elev_m", f"{key}-elev"),
    )
    cols[5].text_input(
        "Target EPH", value=str(round(seg.target_eph, 2)), key=f"{key}-eph",
        on_change=_on_field_change, args=(index, "target_eph", f"{key}-eph"),
    )
    with cols[6]:
        if st.button("Duplicate", key=f"{key}-dup"):
            editor.duplicate(index)
            st.rerun()
        if st.button("Delete", key=f"{key}-del", disabled=len(editor.segments) <= 1):
            editor.delete(index)
            st.rerun()


def main():
    st.set_page_config(page_title="Run Planner", layout="wide")
    cfg = load_config()
    set_locale(cfg.locale)
    st.session_state.setdefault("app_config", cfg)
    st.title("Run Planner")

    uploaded = st.file_uploader("Load a saved plan", type=["json"])
    if uploaded is not None and st.session_state.get("loaded-file") != uploaded.name:
        session = loads_session(uploaded.getvalue().decode("utf-8"))
        if session is not None:
            st.session_state["editor"] = SessionEditor.from_session(session, cfg.default_target_eph)
            st.session_state["loaded-file"] = uploaded.name
            logger.info("Loaded plan %s", session.id)

    editor = _editor()
    header = st.columns([3, 1])
    editor.name = header[0].text_input("Training name", value=editor.name)
    header[1].text_input(
        "Start time", value=editor.global_start_time, key="start-time", on_change=_on_start_change
    )

    for index in range(len(editor.segments)):
        _render_segment_row(editor, index)

    if st.button("Add segment"):
        editor.append()
        st.rerun()

    st.dataframe(build_segments_frame(editor.segments), hide_index=True, use_container_width=True)

    session = editor.to_session()
    summary = st.columns(5)
    summary[0].metric("Distance", fmt_km(session.total_distance))
    summary[1].metric("Elevation", fmt_m(session.total_elevation))
    summary[2].metric("Effort", fmt_ep(session.total_ep))
    summary[3].metric("Duration", format_duration_hours(session.total_duration_hours))
    summary[4].metric("Average intensity", fmt_eph(editor.segments[-1].accu_eph))

    st.download_button(
        "Save plan",
        data=dumps_session(session),
        file_name=f"{session.name or 'plan'}.json",
        mime="application/json",
    )


if __name__ == "__main__":
    main()
