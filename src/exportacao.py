"""Exportacao da colecao de solicitacoes para CSV."""

import csv
from datetime import date

import pandas as pd

from src.cancelamentos import FUSO_PADRAO, Solicitacao
from src.relatorios import formatar_data

CABECALHO = ["ID", "SEAPE", "Empresa", "Motivo", "Status", "Data de Criação"]

PREFIXO_ARQUIVO = "cancelamentos"


def montar_tabela_exportacao(solicitacoes: list[Solicitacao], fuso: str = FUSO_PADRAO) -> pd.DataFrame:
    linhas = [
        [
            s.id,
            s.seape,
            s.empresa,
            s.motivo.value,
            s.status.value,
            formatar_data(s.criado_em, fuso),
        ]
        for s in solicitacoes
    ]
    return pd.DataFrame(linhas, columns=CABECALHO)


def exportar_csv(solicitacoes: list[Solicitacao], fuso: str = FUSO_PADRAO) -> str:
    """Gera o CSV (cabecalho + uma linha por solicitacao), sem quebra de linha final.

    Campos com virgula, aspas ou quebra de linha saem entre aspas.
    """
    df = montar_tabela_exportacao(solicitacoes, fuso)
    texto = df.to_csv(index=False, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    return texto[:-1] if texto.endswith("\n") else texto


def nome_arquivo_exportacao(hoje: date | None = None, prefixo: str = PREFIXO_ARQUIVO) -> str:
    hoje = hoje or date.today()
    return f"{prefixo}_{hoje.isoformat()}.csv"
