class AberturaContaError(Exception):
    """Classe base para exceções customizadas"""
    pass

class SessionStateError(AberturaContaError):
    """Erros relacionados ao estado da sessão do formulário"""
    pass

def handle_error(error: Exception, show_user: bool = True):
    """Tratamento centralizado de erros"""
    import streamlit as st
    import logging
    
    error_map = {
        'SessionStateError': 'A sessão do formulário foi perdida. Recarregue a página e preencha novamente.'
    }
    
    # Log do erro
    logging.error(f"Error: {str(error)}")
    
    # Mensagem para o usuário
    if show_user:
        error_type = error.__class__.__name__
        message = error_map.get(error_type, 'Ocorreu um erro. Por favor, tente novamente.')
        st.error(message)
