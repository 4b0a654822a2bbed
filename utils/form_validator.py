from decimal import Decimal
from typing import Any, Dict, Optional
import numbers
import re
from config.settings import MIN_AGE, MIN_LIMIT, MAX_LIMIT
from utils.account_models import (
    FormFields, Sex,
    FIELD_NAME, FIELD_AGE, FIELD_SEX, FIELD_LIMIT, FIELD_STUDENT,
)

NAME_REQUIRED = 'Name is required.'
AGE_REQUIRED = 'Age is required.'
AGE_NOT_NUMERIC = 'Age must be numeric.'
AGE_UNDER_MINIMUM = f'Minimum age to open an account is {MIN_AGE}.'
SEX_REQUIRED = 'Select a sex.'
LIMIT_OUT_OF_RANGE = f'Limit must be between {MIN_LIMIT} and {MAX_LIMIT}.'
STUDENT_REQUIRED = 'Specify whether you are a student.'

# Mais estrito que um parseInt: "25abc" e "1.5" são rejeitados, não truncados
AGE_PATTERN = re.compile(r'^[+-]?[0-9]+$')

class FormValidator:
    @staticmethod
    def parse_age(age_text: Any) -> Optional[int]:
        """Converte o texto da idade para inteiro (base 10), ou None se não for numérico"""
        text = str(age_text or '').strip()
        if not AGE_PATTERN.match(text):
            return None
        return int(text, 10)

    @staticmethod
    def validate_name(name: Any) -> Optional[str]:
        if not name or str(name).strip() == '':
            return NAME_REQUIRED
        return None

    @staticmethod
    def validate_age(age_text: Any) -> Optional[str]:
        # A tela já filtra para dígitos; o ramo não numérico é só proteção
        if str(age_text or '').strip() == '':
            return AGE_REQUIRED
        age = FormValidator.parse_age(age_text)
        if age is None:
            return AGE_NOT_NUMERIC
        if age < MIN_AGE:
            return AGE_UNDER_MINIMUM
        return None

    @staticmethod
    def validate_sex(sex: Any) -> Optional[str]:
        if sex not in Sex.selectable():
            return SEX_REQUIRED
        return None

    @staticmethod
    def validate_limit(limit: Any) -> Optional[str]:
        if isinstance(limit, bool) or not isinstance(limit, (numbers.Real, Decimal)):
            return LIMIT_OUT_OF_RANGE
        # Decimal NaN lança InvalidOperation ao ser comparado
        if isinstance(limit, Decimal) and limit.is_nan():
            return LIMIT_OUT_OF_RANGE
        # float NaN falha na comparação e também é rejeitado
        if not (MIN_LIMIT <= limit <= MAX_LIMIT):
            return LIMIT_OUT_OF_RANGE
        return None

    @staticmethod
    def validate_student(is_student: Any) -> Optional[str]:
        # Inalcançável com um toggle, mantido para entradas malformadas
        if not isinstance(is_student, bool):
            return STUDENT_REQUIRED
        return None

    @staticmethod
    def validate_account_form(fields: FormFields) -> Dict[str, str]:
        """Valida todos os campos e retorna {campo: mensagem} só para os inválidos"""
        checks = (
            (FIELD_NAME, FormValidator.validate_name(fields.name)),
            (FIELD_AGE, FormValidator.validate_age(fields.age_text)),
            (FIELD_SEX, FormValidator.validate_sex(fields.sex)),
            (FIELD_LIMIT, FormValidator.validate_limit(fields.limit)),
            (FIELD_STUDENT, FormValidator.validate_student(fields.is_student)),
        )
        return {key: message for key, message in checks if message is not None}
