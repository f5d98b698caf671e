import streamlit as st

from src.cancelamentos import RepositorioCancelamentos


def init_session_state():
    if "repositorio" not in st.session_state:
        st.session_state["repositorio"] = RepositorioCancelamentos()


def obter_repositorio() -> RepositorioCancelamentos:
    init_session_state()
    return st.session_state["repositorio"]


def limpar_sessao_para_inicio():
    keys_to_clear = ["repositorio", "msg_sucesso"]
    for key in keys_to_clear:
        if key in st.session_state:
            del st.session_state[key]
