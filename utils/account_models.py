from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional
from config.settings import INITIAL_LIMIT
from utils.date_utils import format_sp_datetime
from utils.text_utils import format_currency, format_yes_no

# Chaves dos campos no mapa de erros
FIELD_NAME = 'name'
FIELD_AGE = 'age'
FIELD_SEX = 'sex'
FIELD_LIMIT = 'limit'
FIELD_STUDENT = 'is_student'

FIELD_KEYS = (FIELD_NAME, FIELD_AGE, FIELD_SEX, FIELD_LIMIT, FIELD_STUDENT)


class Sex(str, Enum):
    UNSET = ''
    MALE = 'male'
    FEMALE = 'female'
    OTHER = 'other'

    @property
    def label(self) -> str:
        """Rótulo exibido no seletor"""
        return {
            Sex.UNSET: '-- Selecione --',
            Sex.MALE: 'Masculino',
            Sex.FEMALE: 'Feminino',
            Sex.OTHER: 'Outro',
        }[self]

    @classmethod
    def selectable(cls) -> List['Sex']:
        return [cls.MALE, cls.FEMALE, cls.OTHER]


@dataclass
class FormFields:
    """Valores atuais do formulário, editados no lugar pelo usuário"""
    name: str = ''
    age_text: str = ''
    sex: Any = Sex.UNSET
    limit: Any = INITIAL_LIMIT
    is_student: Any = False

    def copy(self) -> 'FormFields':
        return FormFields(**asdict(self))


@dataclass(frozen=True)
class AccountSummary:
    """Resumo imutável da conta aberta"""
    name: str
    age: int
    sex: Sex
    limit: float
    is_student: bool
    opened_at: Optional[datetime] = field(default=None, compare=False)

    def display_lines(self) -> List[str]:
        """Linhas exibidas no alerta de sucesso e no resumo"""
        lines = [
            f"Nome: {self.name}",
            f"Idade: {self.age}",
            f"Sexo: {self.sex.label}",
            f"Limite: R$ {format_currency(self.limit)}",
            f"Estudante: {format_yes_no(self.is_student)}",
        ]
        if self.opened_at is not None:
            lines.append(f"Aberta em: {format_sp_datetime(self.opened_at)}")
        return lines
