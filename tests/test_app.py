"""Tests for app.py"""

from streamlit.testing.v1 import AppTest


def _saved_app(title):
    at = AppTest.from_file("../app.py", default_timeout=30)
    at.run()
    at.text_input(key="uc_title").input(title).run()
    at.button(key="btn_save").click().run()
    return at


def test_saved_title_is_html_escaped():
    """Markup typed into the title is shown as text in the portfolio card."""
    at = _saved_app("<b>x")
    rendered = [m.value for m in at.markdown]
    assert any("&lt;b&gt;x" in m for m in rendered)
    assert not any("<b>x" in m for m in rendered)
