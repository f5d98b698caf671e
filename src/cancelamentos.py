"""
Modelo de dominio das solicitacoes de cancelamento.

Define a entidade, os enums de motivo e status, os erros de dominio e a
colecao em memoria com as operacoes de criar, listar e atualizar status.
"""

import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum


class Motivo(str, Enum):
    FINANCEIRO = "FINANCEIRO"
    INSATISFACAO = "INSATISFACAO"
    CONCORRENCIA = "CONCORRENCIA"
    OUTROS = "OUTROS"

    @property
    def rotulo(self) -> str:
        return ROTULOS_MOTIVO[self]


class Status(str, Enum):
    REQUESTED = "REQUESTED"
    REVERSED = "REVERSED"
    CANCELLED = "CANCELLED"

    @property
    def rotulo(self) -> str:
        return ROTULOS_STATUS[self]


ROTULOS_MOTIVO = {
    Motivo.FINANCEIRO: "Financeiro",
    Motivo.INSATISFACAO: "Insatisfação",
    Motivo.CONCORRENCIA: "Concorrência",
    Motivo.OUTROS: "Outros",
}

ROTULOS_STATUS = {
    Status.REQUESTED: "Solicitado",
    Status.REVERSED: "Revertido",
    Status.CANCELLED: "Cancelado",
}

STATUS_FINAIS = (Status.REVERSED, Status.CANCELLED)

FUSO_PADRAO = "America/Sao_Paulo"


class CancelamentoError(ValueError):
    """Erro base do dominio de cancelamentos."""


class CampoObrigatorioError(CancelamentoError):
    def __init__(self, campos):
        self.campos = list(campos)
        super().__init__(f"Campos obrigatorios nao preenchidos: {', '.join(self.campos)}")


class SolicitacaoNaoEncontradaError(CancelamentoError):
    def __init__(self, id_solicitacao):
        self.id_solicitacao = id_solicitacao
        super().__init__(f"Solicitacao {id_solicitacao} nao encontrada")


class TransicaoInvalidaError(CancelamentoError):
    def __init__(self, id_solicitacao, atual, destino):
        self.id_solicitacao = id_solicitacao
        self.atual = atual
        self.destino = destino
        super().__init__(
            f"Transicao invalida para a solicitacao {id_solicitacao}: "
            f"{Status(atual).value} -> {Status(destino).value}"
        )


@dataclass(frozen=True)
class Rascunho:
    """Dados do formulario de nova solicitacao (sem id e data)."""
    seape: str = ""
    empresa: str = ""
    motivo: Motivo = Motivo.FINANCEIRO


@dataclass(frozen=True)
class Solicitacao:
    id: int
    seape: str
    empresa: str
    motivo: Motivo
    status: Status
    criado_em: str

    @property
    def pendente(self) -> bool:
        return self.status == Status.REQUESTED


def validar_rascunho(rascunho: Rascunho) -> Rascunho:
    """Remove espacos das bordas e exige SEAPE e empresa preenchidos."""
    seape = (rascunho.seape or "").strip()
    empresa = (rascunho.empresa or "").strip()

    faltando = []
    if not seape:
        faltando.append("seape")
    if not empresa:
        faltando.append("empresa")

    if faltando:
        raise CampoObrigatorioError(faltando)

    return Rascunho(seape=seape, empresa=empresa, motivo=Motivo(rascunho.motivo))


class GeradorIds:
    """Ids crescentes derivados do relogio em milissegundos.

    Dois pedidos no mesmo milissegundo recebem ids consecutivos.
    """

    def __init__(self, relogio=None):
        self._relogio = relogio or (lambda: int(time.time() * 1000))
        self._ultimo = 0

    def proximo(self) -> int:
        self._ultimo = max(self._relogio(), self._ultimo + 1)
        return self._ultimo


def agora_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class RepositorioCancelamentos:
    """Colecao em memoria, ordenada da mais recente para a mais antiga."""

    def __init__(self, solicitacoes=None, gerador_ids=None, relogio_iso=None):
        self._solicitacoes = list(solicitacoes or [])
        self._gerador_ids = gerador_ids or GeradorIds()
        self._relogio_iso = relogio_iso or agora_iso

    def listar(self) -> list:
        return list(self._solicitacoes)

    def __len__(self):
        return len(self._solicitacoes)

    def buscar(self, id_solicitacao: int) -> Solicitacao:
        for solicitacao in self._solicitacoes:
            if solicitacao.id == id_solicitacao:
                return solicitacao
        raise SolicitacaoNaoEncontradaError(id_solicitacao)

    def criar(self, rascunho: Rascunho) -> Solicitacao:
        dados = validar_rascunho(rascunho)

        nova = Solicitacao(
            id=self._gerador_ids.proximo(),
            seape=dados.seape,
            empresa=dados.empresa,
            motivo=dados.motivo,
            status=Status.REQUESTED,
            criado_em=self._relogio_iso(),
        )
        self._solicitacoes = [nova] + self._solicitacoes
        return nova

    def atualizar_status(self, id_solicitacao: int, novo_status: Status) -> Solicitacao:
        atual = self.buscar(id_solicitacao)
        novo_status = Status(novo_status)

        if atual.status != Status.REQUESTED or novo_status not in STATUS_FINAIS:
            raise TransicaoInvalidaError(id_solicitacao, atual.status, novo_status)

        atualizada = replace(atual, status=novo_status)
        self._solicitacoes = [
            atualizada if s.id == id_solicitacao else s
            for s in self._solicitacoes
        ]
        return atualizada
