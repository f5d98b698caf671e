# Painel de Cancelamentos (Streamlit)
#
# Estrutura:
#
# app/
# ├── __init__.py
# ├── main.py          # Ponto de entrada do Streamlit (abas, formulario, exportacao)
# ├── services/        # Configuracao e log de eventos
# └── utils/           # Componentes de UI e estado da sessao
#
# A logica de dominio fica em src/ (cancelamentos, relatorios, exportacao).
#
# Para executar:
#   streamlit run app/main.py
