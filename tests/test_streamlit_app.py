import time

from streamlit.testing.v1 import AppTest

from coffeetimer.streamlit_app import progress_percent, seconds_left


def _dashboard():
    from coffeetimer.streamlit_app import main

    main()


def test_seconds_left_rounds_up():
    assert seconds_left(100.0, 98.5) == 2
    assert seconds_left(100.0, 99.0) == 1


def test_seconds_left_never_negative():
    assert seconds_left(100.0, 100.0) == 0
    assert seconds_left(100.0, 105.0) == 0


def test_progress_percent_clamps_to_range():
    assert progress_percent(10, 10) == 0
    assert progress_percent(10, 5) == 50
    assert progress_percent(10, 0) == 100
    assert progress_percent(10, 1499) == 0
    assert progress_percent(0, 5) == 0


def test_dashboard_idle_shows_duration():
    at = AppTest.from_function(_dashboard).run()
    assert not at.exception
    assert at.caption[0].value == "Starting coffee timer: 25m (1500 seconds)"


def test_dashboard_reports_invalid_duration():
    at = AppTest.from_function(_dashboard).run()
    at.text_input(key="duration").set_value("99:99").run()
    assert at.error[0].value == "Invalid DURATION: 99:99"


def test_dashboard_survives_duration_shortened_mid_run():
    at = AppTest.from_function(_dashboard, default_timeout=15).run()
    at.text_input(key="duration").set_value("1s")
    at.checkbox(key="once").check()
    # started with a two-second duration, then shortened to one second
    at.session_state["running"] = True
    at.session_state["total_seconds"] = 2
    at.session_state["end_time"] = time.time() + 1.5
    at.run()

    assert not at.exception
    assert at.session_state["running"] is False
    assert at.success[0].value.startswith("✅ Time for coffee!")
