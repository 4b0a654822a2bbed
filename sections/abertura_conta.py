import streamlit as st
import logging
from config.settings import (
    APP_TITLE, MIN_LIMIT, MAX_LIMIT, LIMIT_STEP, AGE_MAX_LENGTH
)
from utils.account_models import (
    Sex, FIELD_NAME, FIELD_AGE, FIELD_SEX, FIELD_LIMIT, FIELD_STUDENT
)
from utils.error_handler import SessionStateError, handle_error
from utils.form_state import AccountFormController
from utils.text_utils import format_currency, only_digits

logger = logging.getLogger(__name__)

SEX_OPTIONS = [Sex.UNSET] + Sex.selectable()

def get_controller() -> AccountFormController:
    """Retorna o controlador da sessão atual, criando um se necessário"""
    if 'account_form' not in st.session_state:
        st.session_state.account_form = AccountFormController()
        logger.info("Nova sessão de abertura de conta iniciada")
    controller = st.session_state.account_form
    if not isinstance(controller, AccountFormController):
        raise SessionStateError(f"Controlador da sessão inválido: {type(controller).__name__}")
    return controller

def init_form_state():
    """Inicializa os valores dos widgets a partir dos campos do formulário"""
    fields = get_controller().fields
    if 'input_nome' not in st.session_state:
        st.session_state.input_nome = fields.name
    if 'input_idade' not in st.session_state:
        st.session_state.input_idade = fields.age_text
    if 'input_sexo' not in st.session_state:
        st.session_state.input_sexo = fields.sex
    if 'input_limite' not in st.session_state:
        st.session_state.input_limite = fields.limit
    if 'input_estudante' not in st.session_state:
        st.session_state.input_estudante = fields.is_student

def on_nome_change():
    get_controller().set_name(st.session_state.input_nome)

def on_idade_change():
    """Mantém apenas dígitos (até 3) antes de repassar ao formulário"""
    idade = only_digits(st.session_state.input_idade, AGE_MAX_LENGTH)
    st.session_state.input_idade = idade
    get_controller().set_age_text(idade)

def on_sexo_change():
    get_controller().set_sex(st.session_state.input_sexo)

def on_limite_change():
    get_controller().set_limit(st.session_state.input_limite)

def on_estudante_change():
    get_controller().set_student(st.session_state.input_estudante)

def render_field_error(controller: AccountFormController, key: str):
    message = controller.error_for(key)
    if message:
        st.error(message)

def render_summary(controller: AccountFormController):
    """Renderiza o resumo da última conta aberta"""
    summary = controller.summary
    if summary is None:
        return
    with st.container(border=True):
        st.markdown("#### Resumo da Conta")
        for line in summary.display_lines():
            st.write(line)

def handle_submit(controller: AccountFormController):
    result = controller.submit()
    # Markdown precisa de dois espaços para quebrar linha
    body = f"**{result.title}**\n\n" + result.message.replace("\n", "  \n")
    if result.ok:
        st.success(body)
    else:
        st.error(body)

def render_abertura_conta():
    """Renderiza a tela de abertura de conta"""
    st.title(APP_TITLE)

    try:
        controller = get_controller()
        init_form_state()
    except SessionStateError as e:
        handle_error(e)
        st.stop()

    # Campo Nome
    st.text_input(
        "Nome *",
        placeholder="Digite seu nome",
        key="input_nome",
        on_change=on_nome_change
    )
    render_field_error(controller, FIELD_NAME)

    # Campo Idade
    st.text_input(
        "Idade *",
        placeholder="Digite sua idade (apenas números)",
        max_chars=AGE_MAX_LENGTH,
        key="input_idade",
        on_change=on_idade_change
    )
    render_field_error(controller, FIELD_AGE)

    # Campo Sexo
    st.selectbox(
        "Sexo *",
        SEX_OPTIONS,
        format_func=lambda sexo: sexo.label,
        key="input_sexo",
        on_change=on_sexo_change
    )
    render_field_error(controller, FIELD_SEX)

    # Limite da conta
    st.markdown(f"Limite da conta: **R$ {format_currency(controller.fields.limit)}**")
    st.slider(
        "Limite da conta *",
        label_visibility="collapsed",
        min_value=MIN_LIMIT,
        max_value=MAX_LIMIT,
        step=LIMIT_STEP,
        key="input_limite",
        on_change=on_limite_change
    )
    render_field_error(controller, FIELD_LIMIT)

    # Estudante
    st.toggle(
        "Estudante? *",
        key="input_estudante",
        on_change=on_estudante_change
    )
    render_field_error(controller, FIELD_STUDENT)

    if st.button("Abrir Conta", type="primary", disabled=not controller.is_ready):
        handle_submit(controller)

    render_summary(controller)
