# error_boundary.py
# Captura de erros inesperados da interface e tela de recuperação

import json
import logging
import platform
import sys
import traceback
from contextlib import contextmanager
from datetime import datetime, timezone

import streamlit as st

from constants import ERROR_FILE

logger = logging.getLogger(__name__)


def serialize_error(exc):
    return {
        "name": type(exc).__name__,
        "message": str(exc),
        "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        "time": datetime.now(timezone.utc).isoformat(),
        "python": sys.version.split()[0],
        "platform": platform.platform(),
    }


def record_error(exc, path=ERROR_FILE):
    """Registra o erro no log e grava o último erro em arquivo local."""
    logger.exception("Erro inesperado na interface", exc_info=exc)
    payload = serialize_error(exc)
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
    except OSError as write_error:
        logger.warning("Não foi possível gravar %s: %s", path, write_error)
    return payload


def render_error_screen(payload, on_reload=None):
    st.title("Algo deu errado")
    st.write(
        "O app encontrou um erro e parou de renderizar. Toque em “Recarregar”. "
        "Se continuar acontecendo, copie o erro abaixo e me envie."
    )
    st.error(f"Detalhes: {payload['message']}")
    st.button("Recarregar", type="primary", on_click=on_reload, key="error_reload")
    with st.expander("Copiar erro"):
        st.code(json.dumps(payload, ensure_ascii=False, indent=2), language="json")


@contextmanager
def error_boundary(on_reload=None, path=ERROR_FILE):
    """
    Envolve o corpo da página. Qualquer exceção apaga o que já foi desenhado
    e mostra a tela de recuperação; o resto da sessão continua intacto.
    """
    page = st.empty()
    try:
        with page.container():
            yield
    except Exception as exc:
        page.empty()
        payload = record_error(exc, path=path)
        render_error_screen(payload, on_reload=on_reload)
