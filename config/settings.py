import os
from dotenv import load_dotenv

# Carrega variáveis de ambiente
load_dotenv()

# Configurações da aplicação
APP_TITLE = os.getenv("APP_TITLE", "Abertura de Conta")
TIMEZONE = os.getenv("APP_TIMEZONE", "America/Sao_Paulo")

# Configurações de log
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Regras do formulário (não configuráveis)
MIN_LIMIT = 500
MAX_LIMIT = 10000
INITIAL_LIMIT = 2500
LIMIT_STEP = 50
MIN_AGE = 18
AGE_MAX_LENGTH = 3
