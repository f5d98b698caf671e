"""
Fixtures compartilhadas para os testes do painel de cancelamentos.
"""

from pathlib import Path

import pytest

from src.cancelamentos import (
    GeradorIds,
    Motivo,
    Rascunho,
    RepositorioCancelamentos,
    Solicitacao,
    Status,
)

# Diretorio raiz do projeto
ROOT_DIR = Path(__file__).parent.parent
APP_MAIN = ROOT_DIR / "app" / "main.py"

INSTANTE_FIXO = "2024-03-10T15:30:00+00:00"


@pytest.fixture
def relogio_fixo():
    """Relogio em milissegundos que nunca avanca (mesmo tick para tudo)."""
    return lambda: 1_700_000_000_000


@pytest.fixture
def repositorio(relogio_fixo):
    """Repositorio vazio com relogios deterministicos."""
    return RepositorioCancelamentos(
        gerador_ids=GeradorIds(relogio_fixo),
        relogio_iso=lambda: INSTANTE_FIXO,
    )


@pytest.fixture
def rascunho_acme():
    return Rascunho(seape="SP-01", empresa="Acme", motivo=Motivo.FINANCEIRO)


@pytest.fixture
def nova_solicitacao():
    """Fabrica de solicitacoes prontas, sem passar pelo repositorio."""
    def _criar(id=1, seape="X", empresa="Y", motivo=Motivo.OUTROS,
               status=Status.REQUESTED, criado_em=INSTANTE_FIXO):
        return Solicitacao(
            id=id,
            seape=seape,
            empresa=empresa,
            motivo=motivo,
            status=status,
            criado_em=criado_em,
        )
    return _criar


@pytest.fixture
def app_main_path():
    return str(APP_MAIN)
