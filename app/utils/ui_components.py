import streamlit as st
import pandas as pd
import plotly.express as px

from src.cancelamentos import Motivo, Rascunho, Status
from src.relatorios import formatar_data

CORES = {
    "Financeiro": "#5C7CFA",
    "Insatisfação": "#F59E0B",
    "Concorrência": "#EF4444",
    "Outros": "#94A3B8",
    "Efetividade": "#2563EB",
}

CORES_STATUS = {
    Status.REVERSED: "green",
    Status.CANCELLED: "red",
    Status.REQUESTED: "orange",
}


def rotulo_status_colorido(status):
    status = Status(status)
    return f":{CORES_STATUS[status]}[{status.rotulo}]"


def configurar_estilo_visual():
    st.markdown("""
        <style>
            #MainMenu {visibility: hidden;}
            footer {visibility: hidden;}
            .block-container {padding-top: 2rem;}
        </style>
    """, unsafe_allow_html=True)


def formulario_solicitacao():
    """Renderiza o formulario e devolve o Rascunho quando enviado."""
    with st.form("form_solicitacao", clear_on_submit=True):
        seape = st.text_input("SEAPE", placeholder="Código SEAPE")
        empresa = st.text_input("Empresa", placeholder="Nome da empresa")
        motivo = st.selectbox(
            "Motivo",
            options=list(Motivo),
            index=0,
            format_func=lambda m: m.rotulo
        )
        enviado = st.form_submit_button("Registrar Solicitação", type="primary", width="stretch")

    if not enviado:
        return None
    return Rascunho(seape=seape, empresa=empresa, motivo=motivo)


def lista_solicitacoes(solicitacoes, on_atualizar_status, total_registros=None):
    if not solicitacoes:
        if total_registros:
            st.info("Nenhuma solicitação para o filtro selecionado.")
        else:
            st.info("Nenhuma solicitação registrada. Use \"Nova Solicitação\" para começar.")
        return

    for idx, item in enumerate(solicitacoes):
        c1, c2, c3 = st.columns([4, 2, 3], vertical_alignment="center")

        c1.markdown(f"**{item.empresa}**")
        c1.caption(f"SEAPE: {item.seape}")
        c1.caption(f"Motivo: {item.motivo.rotulo}")

        c2.markdown(rotulo_status_colorido(item.status))

        if item.pendente:
            b1, b2 = c3.columns(2)
            if b1.button("Revertido", key=f"btn_rev_{item.id}", width="stretch"):
                on_atualizar_status(item.id, Status.REVERSED)
            if b2.button("Cancelado", key=f"btn_can_{item.id}", width="stretch"):
                on_atualizar_status(item.id, Status.CANCELLED)

        if idx < len(solicitacoes) - 1:
            st.divider()


def exibir_visao_geral(resumo):
    with st.container(border=True):
        kpi1, kpi2, kpi3, kpi4 = st.columns(4)
        kpi1.metric("Total de Solicitações", resumo["total"])
        kpi2.metric("Cancelamentos", resumo["cancelados"])
        kpi3.metric("Reversões", resumo["revertidos"])
        kpi4.metric("Em Análise", resumo["solicitados"])

    st.markdown("###")

    col_motivos, col_taxa = st.columns([1, 1])

    with col_motivos:
        with st.container(border=True):
            st.subheader("Motivos de Cancelamento")
            df_motivos = pd.DataFrame(
                [(motivo.rotulo, total) for motivo, total in resumo["por_motivo"].items()],
                columns=["Motivo", "Total"]
            )
            st.dataframe(df_motivos, hide_index=True, width="stretch")

            if resumo["total"] > 0:
                fig_pizza = px.pie(
                    df_motivos,
                    values="Total",
                    names="Motivo",
                    hole=0.4,
                    color="Motivo",
                    color_discrete_map=CORES,
                    height=300
                )
                st.plotly_chart(fig_pizza, width="stretch")

    with col_taxa:
        with st.container(border=True):
            st.subheader("Taxa de Reversão")
            st.metric("Taxa de sucesso em reversões", f"{resumo['taxa_reversao']}%")


def exibir_reversoes(reversoes, fuso):
    if not reversoes:
        st.info("Nenhuma reversão encontrada")
        return

    for idx, item in enumerate(reversoes):
        c1, c2 = st.columns([4, 2], vertical_alignment="center")
        c1.markdown(f"**{item.empresa}**")
        c1.caption(f"SEAPE: {item.seape}")
        c1.caption(f"Motivo Original: {item.motivo.rotulo}")
        c1.caption(f"Data: {formatar_data(item.criado_em, fuso)}")
        c2.markdown(":green[Revertido com Sucesso]")

        if idx < len(reversoes) - 1:
            st.divider()


def _tabela_contagem(contagem, nome_chave):
    return pd.DataFrame(list(contagem.items()), columns=[nome_chave, "Total"])


def exibir_relatorios(por_data, por_empresa, efetividade):
    col_temporal, col_empresa = st.columns([1, 1])

    with col_temporal:
        with st.container(border=True):
            st.subheader("Análise Temporal")
            st.caption("Distribuição de solicitações por período")
            if por_data:
                st.dataframe(_tabela_contagem(por_data, "Data"), hide_index=True, width="stretch")
            else:
                st.caption("Sem dados no período.")

    with col_empresa:
        with st.container(border=True):
            st.subheader("Análise por Empresa")
            st.caption("Solicitações agrupadas por empresa")
            if por_empresa:
                st.dataframe(_tabela_contagem(por_empresa, "Empresa"), hide_index=True, width="stretch")
            else:
                st.caption("Sem dados de empresas.")

    with st.container(border=True):
        st.subheader("Análise de Efetividade")
        st.caption("Taxa de sucesso por motivo de cancelamento")

        df_efetividade = pd.DataFrame(
            [(motivo.rotulo, taxa) for motivo, taxa in efetividade.items()],
            columns=["Motivo", "Taxa"]
        )

        fig = px.bar(
            df_efetividade,
            x="Taxa",
            y="Motivo",
            orientation="h",
            text=df_efetividade["Taxa"].map(lambda t: f"{t}%"),
            range_x=[0, 100],
            color_discrete_sequence=[CORES["Efetividade"]],
            height=300
        )

        fig.update_layout(
            xaxis_title="Taxa de reversão (%)",
            yaxis_title="",
            yaxis=dict(autorange="reversed"),
            bargap=0.3
        )

        st.plotly_chart(fig, width="stretch")
