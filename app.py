import streamlit as st

from src.config.log import configure_logging
from src.config.version import PROJECT_NAME
from src.ui.layout import render_dashboard


def main() -> None:
    configure_logging()
    st.set_page_config(
        page_title=PROJECT_NAME,
        layout="wide",
    )
    render_dashboard()


if __name__ == "__main__":
    main()
