"""
Streamlit preview for the weather stripe widgets.
Runs a widget script for the entered city and shows the widget inline.

    streamlit run preview.py
"""

import streamlit as st
import streamlit.components.v1 as components

from app import app, render_widget_html, temperature_run, cloud_run
from config import DEFAULT_CITY
from widget import build_error_widget

SCRIPTS = {
    "Temperature stripes": temperature_run,
    "Cloud stripes": cloud_run,
}

st.title("Weather Stripes")

city = st.text_input("City:", value=DEFAULT_CITY)
script = st.radio("Widget:", list(SCRIPTS))

if st.button("Show Widget"):
    if not city.strip():
        st.error("Please enter a city.")
    else:
        with st.spinner("Fetching weather..."):
            try:
                widget, _ = SCRIPTS[script](city.strip())
            except Exception as e:
                st.error(f"Failed to build widget: {e}")
                widget = build_error_widget(str(e))

        with app.app_context():
            html = render_widget_html(widget, inline_css=True)
        components.html(html, height=260)

        with st.expander("Stripes"):
            for stripe in widget.stripes:
                st.markdown(f"`{stripe.color}` {stripe.label}")
