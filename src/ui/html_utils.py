"""Helpers for HTML snippets rendered through st.markdown."""
from html import escape
from textwrap import dedent


def html_block(template: str) -> str:
    """
    Flatten multi-line HTML so Streamlit doesn't treat it as Markdown code.

    Lines with 4+ leading spaces would render as a code block, so every
    line is dedented and left-stripped.
    """
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def text(value: str) -> str:
    """Escape text content from data files before embedding it in markup."""
    return escape(value or "", quote=True)
