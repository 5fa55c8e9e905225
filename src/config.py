"""
Configuração da aplicação via variáveis de ambiente
"""
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_RELOAD = os.getenv("APP_RELOAD", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configurar_logging(level: Optional[str] = None):
    """Configura o logging raiz em stderr, deixando stdout só para a saída dos pedidos"""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
