from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_FILE_VARIABLE = "VOYAGE_ENV_FILE"


def env_file_path() -> Path:
    """Arquivo ``.env`` do projeto, ou o indicado em ``VOYAGE_ENV_FILE``."""

    configured = os.getenv(ENV_FILE_VARIABLE)
    if configured:
        return Path(configured).expanduser()
    return Path(__file__).resolve().parent.parent / ".env"


@lru_cache(maxsize=1)
def load_env() -> Path | None:
    """Carrega o ``.env`` sem sobrescrever variáveis já definidas no ambiente.

    Retorna o caminho carregado ou ``None`` quando o arquivo não existe.
    """

    env_path = env_file_path()
    if not env_path.is_file():
        return None
    load_dotenv(env_path, override=False)
    return env_path
