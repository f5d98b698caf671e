import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from src.cancelamentos import FUSO_PADRAO

ENV_PATH = Path(__file__).parent.parent / "settings.env"

TITULO_PADRAO = "Painel de Cancelamentos"
NIVEL_LOG_PADRAO = "INFO"


@dataclass(frozen=True)
class Configuracao:
    titulo: str = TITULO_PADRAO
    fuso_horario: str = FUSO_PADRAO
    nivel_log: str = NIVEL_LOG_PADRAO


def carregar_configuracao(env_path=ENV_PATH):
    """Le settings.env (se existir) e as variaveis de ambiente do processo."""
    if Path(env_path).exists():
        load_dotenv(env_path, override=False)

    fuso = os.getenv("PAINEL_FUSO_HORARIO", FUSO_PADRAO)
    try:
        ZoneInfo(fuso)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Fuso horario invalido em PAINEL_FUSO_HORARIO: {fuso}") from e

    return Configuracao(
        titulo=os.getenv("PAINEL_TITULO", TITULO_PADRAO),
        fuso_horario=fuso,
        nivel_log=os.getenv("LOG_LEVEL", NIVEL_LOG_PADRAO).upper(),
    )
