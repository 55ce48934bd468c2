"""Tests for unexpected-fault capture."""

import json
import logging

import pytest
from streamlit.testing.v1 import AppTest

from error_boundary import serialize_error, record_error


def _raise_and_catch():
    try:
        raise ValueError("falha de teste")
    except ValueError as exc:
        return exc


def test_serialize_error() -> None:
    payload = serialize_error(_raise_and_catch())

    assert payload["name"] == "ValueError"
    assert payload["message"] == "falha de teste"
    assert "Traceback" in payload["stack"]
    assert {"time", "python", "platform"} <= payload.keys()


def test_record_error_writes_last_error(tmp_path, caplog) -> None:
    target = tmp_path / "last_error.json"
    with caplog.at_level(logging.ERROR, logger="error_boundary"):
        payload = record_error(_raise_and_catch(), path=str(target))

    stored = json.loads(target.read_text(encoding="utf-8"))
    assert stored == payload
    assert "Erro inesperado" in caplog.text


def test_record_error_survives_unwritable_path(tmp_path, caplog) -> None:
    missing_dir = tmp_path / "nao-existe" / "last_error.json"
    with caplog.at_level(logging.WARNING, logger="error_boundary"):
        payload = record_error(_raise_and_catch(), path=str(missing_dir))

    assert payload["name"] == "ValueError"
    assert "Não foi possível gravar" in caplog.text


# =============================================================================
# Recovery screen
# =============================================================================


def _failing_page():
    import streamlit as st

    from error_boundary import error_boundary

    def reload_page():
        st.session_state["reloaded"] = True

    with error_boundary(on_reload=reload_page):
        st.title("Página")
        st.write("conteúdo parcial")
        if not st.session_state.get("reloaded"):
            raise RuntimeError("falha na interface")


@pytest.fixture
def failing_app(tmp_path, monkeypatch) -> AppTest:
    monkeypatch.chdir(tmp_path)
    return AppTest.from_function(_failing_page, default_timeout=30).run()


class TestErrorBoundary:
    def test_fault_replaces_page_with_recovery_screen(self, failing_app) -> None:
        assert not failing_app.exception
        assert [t.value for t in failing_app.title] == ["Algo deu errado"]
        assert all("conteúdo parcial" not in m.value for m in failing_app.markdown)
        assert any("falha na interface" in e.value for e in failing_app.error)

    def test_fault_written_to_error_file(self, failing_app, tmp_path) -> None:
        stored = json.loads((tmp_path / "last_error.json").read_text(encoding="utf-8"))
        assert stored["name"] == "RuntimeError"
        assert stored["message"] == "falha na interface"

    def test_reload_runs_reset(self, failing_app) -> None:
        failing_app.button(key="error_reload").click().run()

        assert failing_app.session_state["reloaded"] is True
        assert [t.value for t in failing_app.title] == ["Página"]
        assert not failing_app.error
