"""Streamlit dashboard for the coffee timer.

Run with:

    streamlit run src/coffeetimer/streamlit_app.py

The sidebar takes the same DURATION and MESSAGE as the command line. When the
countdown reaches zero the message is shown with a timestamp and a generated
beep is played; the timer starts over unless "Once" is ticked.
"""
from __future__ import annotations

import math
import time

import streamlit as st

from coffeetimer import alert, timer
from coffeetimer.duration import DurationError, format_hhmmss, parse_duration


def seconds_left(end_time: float, now: float) -> int:
    """Whole seconds until ``end_time``, rounded up and never negative."""
    return max(0, math.ceil(end_time - now))


def progress_percent(total: int, remaining: int) -> int:
    """Elapsed share of ``total`` as a whole percentage clamped to 0..100."""
    if total <= 0:
        return 0
    return max(0, min(100, int((total - remaining) * 100 / total)))


def main() -> None:
    st.set_page_config(page_title="Coffee Timer", layout="centered")

    st.title("Coffee Timer")

    with st.sidebar:
        duration_text = st.text_input("Duration", value="25m", help="25m, 1h30m, 45s, 15:00, 01:15:00", key="duration")
        message = st.text_input("Message", value=timer.DEFAULTS["message"])
        once = st.checkbox("Once (do not repeat)", value=False, key="once")

    try:
        seconds = parse_duration(duration_text)
    except DurationError as exc:
        st.error(str(exc))
        return

    st.caption(f"Starting coffee timer: {duration_text} ({seconds} seconds)")

    st.markdown(
        """
        <style>
        .big-timer {font-size:64px; font-weight:700; text-align:center; margin: 12px 0}
        div.stButton > button {height:64px; width:100%; font-size:20px}
        </style>
        """,
        unsafe_allow_html=True,
    )

    if "running" not in st.session_state:
        st.session_state.running = False
    if "end_time" not in st.session_state:
        st.session_state.end_time = 0.0
    if "completed" not in st.session_state:
        st.session_state.completed = []
    if "total_seconds" not in st.session_state:
        st.session_state.total_seconds = 0

    c1, c2 = st.columns([1, 1])
    if c1.button("Start"):
        st.session_state.running = True
        st.session_state.total_seconds = seconds
        st.session_state.end_time = time.time() + seconds
    if c2.button("Cancel"):
        if st.session_state.running:
            st.toast("Cancelled. Bye!")
        st.session_state.running = False
        st.session_state.end_time = 0.0

    status = st.empty()
    prog = st.progress(0)

    for line in st.session_state.completed:
        st.success(line)

    if not st.session_state.running:
        status.markdown(f"<div class='big-timer'>⏳ {format_hhmmss(seconds)}</div>", unsafe_allow_html=True)
        return

    total = st.session_state.total_seconds or seconds
    remaining = seconds_left(st.session_state.end_time, time.time())
    status.markdown(f"<div class='big-timer'>⏳ {format_hhmmss(remaining)}</div>", unsafe_allow_html=True)
    prog.progress(progress_percent(total, remaining))

    if remaining > 0:
        time.sleep(1)
        st.rerun()
        return

    st.session_state.completed.insert(0, f"✅ {message}  ({alert.timestamp_now()})")
    st.audio(alert.generate_beep(duration_s=0.6, volume=0.6), autoplay=True)
    if once:
        st.session_state.running = False
        st.session_state.end_time = 0.0
    else:
        st.session_state.end_time = time.time() + total
    time.sleep(1)
    st.rerun()


if __name__ == "__main__":
    main()
