from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging
from utils.account_models import AccountSummary, FormFields, Sex
from utils.date_utils import get_sp_datetime
from utils.form_validator import FormValidator

logger = logging.getLogger(__name__)

@dataclass
class SubmitResult:
    """Resultado de uma tentativa de abertura de conta"""
    ok: bool
    errors: List[str] = field(default_factory=list)
    summary: Optional[AccountSummary] = None

    @property
    def title(self) -> str:
        return 'Conta Aberta' if self.ok else 'Erros no formulário'

    @property
    def message(self) -> str:
        if self.ok:
            return '\n'.join(self.summary.display_lines())
        return '\n'.join(self.errors)


class AccountFormController:
    """
    Estado de uma sessão do formulário de abertura de conta.

    Cada setter sobrescreve o campo e revalida o formulário inteiro; o mapa
    de erros nunca é atualizado parcialmente. Nenhuma operação lança exceção:
    falhas de validação são devolvidas como dados.
    """

    def __init__(self, fields: Optional[FormFields] = None):
        self._fields = fields.copy() if fields is not None else FormFields()
        self._errors: Dict[str, str] = {}
        self._ready = False
        self._summary: Optional[AccountSummary] = None
        self.revalidate()

    @property
    def fields(self) -> FormFields:
        return self._fields.copy()

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def summary(self) -> Optional[AccountSummary]:
        return self._summary

    def error_for(self, key: str) -> Optional[str]:
        return self._errors.get(key)

    def set_name(self, name: str):
        self._fields.name = name
        self.revalidate()

    def set_age_text(self, age_text: str):
        self._fields.age_text = age_text
        self.revalidate()

    def set_sex(self, sex: Any):
        self._fields.sex = sex
        self.revalidate()

    def set_limit(self, limit: Any):
        # Sem checagem de faixa aqui; o validador é quem decide
        self._fields.limit = limit
        self.revalidate()

    def set_student(self, is_student: Any):
        self._fields.is_student = is_student
        self.revalidate()

    def revalidate(self) -> Dict[str, str]:
        """Recalcula os erros a partir dos campos atuais"""
        self._errors = FormValidator.validate_account_form(self._fields)
        self._ready = not self._errors
        logger.debug(f"Formulário revalidado: {len(self._errors)} erro(s)")
        return dict(self._errors)

    def submit(self) -> SubmitResult:
        """Abre a conta se o formulário for válido; caso contrário devolve os erros"""
        errors = self.revalidate()
        if errors:
            logger.warning(f"Abertura de conta recusada, campos inválidos: {', '.join(errors)}")
            return SubmitResult(ok=False, errors=list(errors.values()))

        summary = AccountSummary(
            name=str(self._fields.name).strip(),
            age=FormValidator.parse_age(self._fields.age_text),
            sex=Sex(self._fields.sex),
            limit=self._fields.limit,
            is_student=self._fields.is_student,
            opened_at=get_sp_datetime(),
        )
        self._summary = summary
        logger.info(f"Conta aberta (idade {summary.age}, limite {summary.limit})")
        return SubmitResult(ok=True, summary=summary)
