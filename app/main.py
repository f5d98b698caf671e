import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.services.configuracao import carregar_configuracao
from app.services.logger import LogMonitoramento, configurar_logging
from app.utils.session_manager import limpar_sessao_para_inicio, obter_repositorio
from app.utils.ui_components import (
    configurar_estilo_visual,
    exibir_relatorios,
    exibir_reversoes,
    exibir_visao_geral,
    formulario_solicitacao,
    lista_solicitacoes,
)
from src.cancelamentos import CancelamentoError, Status
from src.exportacao import exportar_csv, nome_arquivo_exportacao
from src.relatorios import (
    agrupar_por_data,
    agrupar_por_empresa,
    efetividade_por_motivo,
    listar_reversoes,
    resumo_geral,
)


@st.cache_resource
def iniciar_configuracao():
    config = carregar_configuracao()
    configurar_logging(config.nivel_log)
    return config


config = iniciar_configuracao()

st.set_page_config(
    page_title=config.titulo,
    layout="wide"
)

configurar_estilo_visual()

log = LogMonitoramento()
repositorio = obter_repositorio()

if "msg_sucesso" in st.session_state:
    st.toast(st.session_state["msg_sucesso"])
    del st.session_state["msg_sucesso"]


@st.dialog("Nova Solicitação de Cancelamento")
def dialogo_nova_solicitacao():
    rascunho = formulario_solicitacao()
    if rascunho is None:
        return

    try:
        nova = repositorio.criar(rascunho)
    except CancelamentoError as e:
        log.registrar_erro("CRIACAO", e)
        st.error("Preencha os campos SEAPE e Empresa.")
        return

    log.registrar_criacao(nova)
    st.session_state["msg_sucesso"] = f"Solicitação de {nova.empresa} registrada."
    st.rerun()


def atualizar_status(id_solicitacao, novo_status):
    try:
        atualizada = repositorio.atualizar_status(id_solicitacao, novo_status)
    except CancelamentoError as e:
        log.registrar_erro("ATUALIZACAO_STATUS", e)
        st.error(f"Não foi possível atualizar a solicitação: {e}")
        return

    log.registrar_transicao(atualizada)
    st.rerun()


with st.sidebar:
    st.header("Painel")
    st.caption("Os dados ficam apenas nesta sessão e são perdidos ao recarregar a página.")

    st.divider()

    if st.button("Reiniciar Painel", width="stretch"):
        limpar_sessao_para_inicio()
        st.rerun()

st.title(config.titulo)

solicitacoes = repositorio.listar()
hoje = datetime.now(ZoneInfo(config.fuso_horario)).date()
nome_arquivo = nome_arquivo_exportacao(hoje)

col_vazio, col_nova, col_exportar = st.columns([6, 2, 2])

with col_nova:
    if st.button("Nova Solicitação", type="primary", width="stretch"):
        dialogo_nova_solicitacao()

with col_exportar:
    st.download_button(
        "Exportar",
        data=exportar_csv(solicitacoes, config.fuso_horario).encode("utf-8"),
        file_name=nome_arquivo,
        mime="text/csv",
        width="stretch",
        on_click=log.registrar_exportacao,
        args=(nome_arquivo, len(solicitacoes)),
    )

aba_solicitacoes, aba_visao_geral, aba_reversoes, aba_relatorios = st.tabs(
    ["Solicitações", "Visão Geral", "Reversões", "Relatórios"]
)

with aba_solicitacoes:
    with st.container(border=True):
        st.subheader("Solicitações de Cancelamento")
        st.caption("Gerencie as solicitações de cancelamento do mês atual")

        with st.expander("Filtros Avançados", expanded=False):
            filtro_status = st.multiselect(
                "Filtrar por Status:",
                options=list(Status),
                default=list(Status),
                format_func=lambda s: s.rotulo,
                key="filtro_status"
            )

        visiveis = [s for s in solicitacoes if s.status in filtro_status]
        lista_solicitacoes(visiveis, atualizar_status, total_registros=len(solicitacoes))

with aba_visao_geral:
    exibir_visao_geral(resumo_geral(solicitacoes))

with aba_reversoes:
    with st.container(border=True):
        st.subheader("Reversões")
        st.caption("Acompanhe as reversões de cancelamento")
        exibir_reversoes(listar_reversoes(solicitacoes), config.fuso_horario)

with aba_relatorios:
    exibir_relatorios(
        agrupar_por_data(solicitacoes, config.fuso_horario),
        agrupar_por_empresa(solicitacoes),
        efetividade_por_motivo(solicitacoes),
    )
