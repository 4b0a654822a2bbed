import logging
import pytest
from utils.account_models import AccountSummary, FormFields, Sex
from utils.form_state import AccountFormController

def fill_maria(controller):
    controller.set_name("Maria")
    controller.set_age_text("25")
    controller.set_sex(Sex.FEMALE)
    controller.set_limit(3000)
    controller.set_student(True)

def test_initial_state_is_incomplete():
    controller = AccountFormController()
    fields = controller.fields
    assert fields.name == ""
    assert fields.age_text == ""
    assert fields.sex == Sex.UNSET
    assert fields.limit == 2500
    assert fields.is_student == False
    assert controller.is_ready == False
    assert set(controller.errors) == {"name", "age", "sex"}
    assert controller.summary is None

def test_setters_revalidate():
    controller = AccountFormController()
    controller.set_name("Maria")
    assert controller.error_for("name") is None
    controller.set_age_text("17")
    assert controller.error_for("age") == "Minimum age to open an account is 18."
    controller.set_age_text("18")
    assert controller.error_for("age") is None

def test_set_limit_accepts_out_of_range_values():
    controller = AccountFormController()
    controller.set_limit(20000)
    assert controller.fields.limit == 20000
    assert controller.error_for("limit") == "Limit must be between 500 and 10000."

def test_revalidate_is_idempotent():
    controller = AccountFormController()
    controller.set_name("  ")
    first = controller.revalidate()
    second = controller.revalidate()
    assert first == second
    assert controller.errors == second

def test_errors_are_copies():
    controller = AccountFormController()
    controller.errors.clear()
    assert controller.is_ready == False
    assert controller.errors != {}

def test_ready_state_is_recomputed_after_every_change():
    controller = AccountFormController()
    fill_maria(controller)
    assert controller.is_ready == True
    controller.set_name("")
    assert controller.is_ready == False
    controller.set_name("Maria")
    assert controller.is_ready == True

def test_end_to_end_valid_submission():
    controller = AccountFormController()
    fill_maria(controller)
    assert controller.errors == {}
    assert controller.is_ready == True

    result = controller.submit()

    assert result.ok == True
    assert result.errors == []
    assert result.title == "Conta Aberta"
    assert controller.summary == AccountSummary(
        name="Maria", age=25, sex=Sex.FEMALE, limit=3000, is_student=True
    )
    assert result.summary.sex.value == "female"
    assert result.summary.opened_at is not None
    assert "Nome: Maria" in result.message

def test_end_to_end_invalid_submission():
    controller = AccountFormController(
        FormFields(name="", age_text="15", sex=Sex.UNSET, limit=400, is_student=True)
    )
    assert set(controller.errors) == {"name", "age", "sex", "limit"}
    assert controller.is_ready == False

    result = controller.submit()

    assert result.ok == False
    assert result.summary is None
    assert result.title == "Erros no formulário"
    assert result.errors == [
        "Name is required.",
        "Minimum age to open an account is 18.",
        "Select a sex.",
        "Limit must be between 500 and 10000.",
    ]
    assert result.message == "\n".join(result.errors)
    assert controller.summary is None

@pytest.mark.parametrize("field, value", [
    ("set_name", " "),
    ("set_age_text", "12"),
    ("set_sex", Sex.UNSET),
    ("set_limit", 10001),
    ("set_student", None),
])
def test_invalid_submission_keeps_previous_summary(field, value):
    controller = AccountFormController()
    fill_maria(controller)
    previous = controller.submit().summary

    getattr(controller, field)(value)
    result = controller.submit()

    assert result.ok == False
    assert controller.summary is previous

def test_summary_is_independent_of_later_edits():
    controller = AccountFormController()
    fill_maria(controller)
    summary = controller.submit().summary
    controller.set_name("Joana")
    controller.set_limit(800)
    assert summary.name == "Maria"
    assert summary.limit == 3000
    assert controller.summary is summary

def test_resubmission_replaces_summary():
    controller = AccountFormController()
    fill_maria(controller)
    first = controller.submit().summary
    controller.set_name("  Joana  ")
    controller.set_sex("other")
    second = controller.submit().summary
    assert second is not first
    assert controller.summary is second
    assert second.name == "Joana"
    assert second.sex == Sex.OTHER

def test_controllers_do_not_share_state():
    first = AccountFormController()
    second = AccountFormController()
    first.set_name("Maria")
    assert second.fields.name == ""

def test_constructor_copies_fields():
    fields = FormFields(name="Maria")
    controller = AccountFormController(fields)
    fields.name = ""
    assert controller.fields.name == "Maria"

def test_submission_log_omits_name(caplog):
    controller = AccountFormController()
    fill_maria(controller)
    with caplog.at_level(logging.INFO, logger="utils.form_state"):
        controller.submit()
    assert "Conta aberta (idade 25, limite 3000)" in caplog.text
    assert "Maria" not in caplog.text

def test_message_joins_summary_lines():
    controller = AccountFormController()
    fill_maria(controller)
    result = controller.submit()
    assert result.message.split("\n")[:5] == [
        "Nome: Maria",
        "Idade: 25",
        "Sexo: Feminino",
        "Limite: R$ 3.000,00",
        "Estudante: Sim",
    ]
