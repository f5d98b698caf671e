"""
Indicadores derivados da colecao de solicitacoes.

Todas as funcoes sao puras: recebem a lista atual de solicitacoes e
recalculam os numeros do zero a cada renderizacao.
"""

import math
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pandas as pd

from src.cancelamentos import FUSO_PADRAO, Motivo, Status, Solicitacao

COLUNAS = ["id", "seape", "empresa", "motivo", "status", "criado_em"]


def arredondar_percentual(parte: int, total: int) -> int:
    """Percentual inteiro com meio arredondado para cima; 0 quando total e 0."""
    if not total:
        return 0
    return int(math.floor(100 * parte / total + 0.5))


def formatar_data(criado_em: str, fuso: str = FUSO_PADRAO) -> str:
    """Converte o instante ISO para DD/MM/YYYY no fuso informado."""
    instante = datetime.fromisoformat(criado_em)
    if instante.tzinfo is None:
        instante = instante.replace(tzinfo=timezone.utc)
    return instante.astimezone(ZoneInfo(fuso)).strftime("%d/%m/%Y")


def para_dataframe(solicitacoes: list[Solicitacao]) -> pd.DataFrame:
    if not solicitacoes:
        return pd.DataFrame(columns=COLUNAS)

    return pd.DataFrame([
        {
            "id": s.id,
            "seape": s.seape,
            "empresa": s.empresa,
            "motivo": s.motivo.value,
            "status": s.status.value,
            "criado_em": s.criado_em,
        }
        for s in solicitacoes
    ], columns=COLUNAS)


def contar_por_motivo(solicitacoes: list[Solicitacao]) -> dict:
    df = para_dataframe(solicitacoes)
    contagem = df["motivo"].value_counts()
    return {motivo: int(contagem.get(motivo.value, 0)) for motivo in Motivo}


def taxa_reversao(solicitacoes: list[Solicitacao]) -> int:
    revertidos = sum(1 for s in solicitacoes if s.status == Status.REVERSED)
    return arredondar_percentual(revertidos, len(solicitacoes))


def resumo_geral(solicitacoes: list[Solicitacao]) -> dict:
    df = para_dataframe(solicitacoes)
    por_status = df["status"].value_counts()

    return {
        "total": len(df),
        "cancelados": int(por_status.get(Status.CANCELLED.value, 0)),
        "revertidos": int(por_status.get(Status.REVERSED.value, 0)),
        "solicitados": int(por_status.get(Status.REQUESTED.value, 0)),
        "por_motivo": contar_por_motivo(solicitacoes),
        "taxa_reversao": taxa_reversao(solicitacoes),
    }


def listar_reversoes(solicitacoes: list[Solicitacao]) -> list[Solicitacao]:
    return [s for s in solicitacoes if s.status == Status.REVERSED]


def _contar_na_ordem(serie: pd.Series) -> dict:
    # sort=False mantem a ordem em que cada chave aparece pela primeira vez
    contagem = serie.groupby(serie, sort=False).size()
    return {chave: int(total) for chave, total in contagem.items()}


def agrupar_por_data(solicitacoes: list[Solicitacao], fuso: str = FUSO_PADRAO) -> dict:
    df = para_dataframe(solicitacoes)
    datas = df["criado_em"].map(lambda valor: formatar_data(valor, fuso))
    return _contar_na_ordem(datas)


def agrupar_por_empresa(solicitacoes: list[Solicitacao]) -> dict:
    df = para_dataframe(solicitacoes)
    return _contar_na_ordem(df["empresa"])


def efetividade_por_motivo(solicitacoes: list[Solicitacao]) -> dict:
    """Taxa de reversao de cada motivo, sempre com os quatro motivos."""
    efetividade = {}
    for motivo in Motivo:
        do_motivo = [s for s in solicitacoes if s.motivo == motivo]
        revertidos = [s for s in do_motivo if s.status == Status.REVERSED]
        efetividade[motivo] = arredondar_percentual(len(revertidos), len(do_motivo))
    return efetividade
