import streamlit as st
from config.settings import APP_TITLE
from sections.abertura_conta import render_abertura_conta
from utils.logger import setup_logger

def main():
    logger = setup_logger()
    logger.debug("Renderizando tela de abertura de conta")
    render_abertura_conta()

if __name__ == "__main__":
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🏦",
        layout="centered"
    )
    main()
