import string
from typing import Optional

def only_digits(text: Optional[str], max_length: Optional[int] = None) -> str:
    """Remove caracteres não numéricos e limita o tamanho do texto"""
    digits = ''.join(c for c in str(text or '') if c in string.digits)
    if max_length is not None:
        digits = digits[:max_length]
    return digits

def format_currency(value: float) -> str:
    """Formata valor no padrão brasileiro (1.234,56)"""
    formatted = f"{value:,.2f}"
    return formatted.replace(',', '_').replace('.', ',').replace('_', '.')

def format_yes_no(value: bool) -> str:
    return 'Sim' if value else 'Não'
