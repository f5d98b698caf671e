import logging
import sys
from datetime import datetime, timezone

NOME_LOGGER = "painel"


class FormatadorISO8601(logging.Formatter):
    """Formato: 2026-01-06T14:05:52Z [painel] INFO mensagem"""

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        mensagem = record.getMessage()
        if record.exc_info:
            mensagem = f"{mensagem}\n{self.formatException(record.exc_info)}"
        return f"{timestamp} [{NOME_LOGGER}] {record.levelname} {mensagem}"


def configurar_logging(nivel="INFO"):
    logger = logging.getLogger(NOME_LOGGER)
    logger.setLevel(getattr(logging, str(nivel).upper(), logging.INFO))

    # Streamlit reexecuta o script a cada interacao; evita handlers duplicados
    if not any(isinstance(h.formatter, FormatadorISO8601) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FormatadorISO8601())
        logger.addHandler(handler)
        logger.propagate = False

    return logger


class LogMonitoramento:
    """Registra os eventos do painel: criacao, mudanca de status, exportacao e erros."""

    def __init__(self, logger=None):
        self.logger = logger or logging.getLogger(NOME_LOGGER)

    def registrar_criacao(self, solicitacao):
        self.logger.info(
            "Solicitacao criada id=%s seape=%s empresa=%s motivo=%s",
            solicitacao.id, solicitacao.seape, solicitacao.empresa, solicitacao.motivo.value
        )

    def registrar_transicao(self, solicitacao):
        self.logger.info(
            "Status atualizado id=%s status=%s", solicitacao.id, solicitacao.status.value
        )

    def registrar_exportacao(self, nome_arquivo, total_registros):
        self.logger.info("Exportacao gerada arquivo=%s registros=%s", nome_arquivo, total_registros)

    def registrar_erro(self, etapa, erro):
        self.logger.warning("Falha em %s: %s: %s", etapa, type(erro).__name__, str(erro)[0:500])
