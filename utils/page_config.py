import streamlit as st

def set_common_page_config(page_title: str, layout: str = "wide"):
    """
    Shared favicon and layout. Must be called before any other Streamlit command.

    Parameters
    ----------
    page_title : str
        Title of the page (appears in browser tab)
    layout : str, optional
        Page layout mode ('centered' or 'wide'), by default 'wide'
    """
    st.set_page_config(page_title=page_title, page_icon="🏢", layout=layout)
