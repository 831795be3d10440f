from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parents[1] / "app.py")


def run_app():
    return AppTest.from_file(APP, default_timeout=120).run()


def test_app_runs_with_defaults():
    at = run_app()
    assert not at.exception
    assert at.session_state["order"] == [0, 1, 2]
    assert at.text_input(key="value_A").value == "1"


def test_shuffle_button_keeps_permutation():
    at = run_app()
    for _ in range(5):
        at.button(key="shuffle_button").click().run()
        assert not at.exception
        assert sorted(at.session_state["order"]) == [0, 1, 2]


def test_reset_order_button():
    at = run_app()
    at.session_state["order"] = [2, 1, 0]
    at.button(key="reset_order_button").click().run()
    assert at.session_state["order"] == [0, 1, 2]


def test_invalid_input_and_bias_toggle():
    at = run_app()
    at.text_input(key="value_B").input("abc").run()
    assert not at.exception
    at.checkbox(key="bias_enabled").check().run()
    assert not at.exception
