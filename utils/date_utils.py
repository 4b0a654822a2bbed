from datetime import datetime
import pytz
from config.settings import TIMEZONE

SP_TZ = pytz.timezone(TIMEZONE)

def get_sp_datetime() -> datetime:
    """Retorna a data e hora atual no timezone de São Paulo"""
    return datetime.now(SP_TZ)

def format_sp_datetime(dt: datetime) -> str:
    """Formata a data e hora no padrão brasileiro"""
    return dt.strftime('%d/%m/%Y %H:%M:%S')
