import logging
import os
from datetime import datetime
from config.settings import LOG_DIR, LOG_LEVEL

def setup_logger():
    """Configura o sistema de logging"""
    # Criar diretório de logs se não existir
    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)
    
    # Nome do arquivo de log com data
    log_file = os.path.join(LOG_DIR, f"abertura_conta_{datetime.now().strftime('%Y%m%d')}.log")
    
    # Configuração do logging
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
    
    return logging.getLogger('abertura_conta')
