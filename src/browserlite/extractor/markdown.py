"""
HTML to GitHub-flavoured Markdown conversion.
"""

from __future__ import annotations

from typing import Any

from markdownify import ATX, MarkdownConverter


def _code_language(el: Any) -> str:
    """Read the fence language from a ``language-*`` class on <pre> or its <code>."""
    code = el.find("code")
    for node in (code, el):
        if node is None:
            continue
        for css_class in node.get("class") or []:
            if css_class.startswith("language-"):
                return css_class[len("language-") :]
    return ""


class GfmMarkdownConverter(MarkdownConverter):
    """markdownify converter with ATX headings, fenced code and GFM extensions."""

    class Options(MarkdownConverter.DefaultOptions):
        heading_style = ATX
        bullets = "-"
        code_language_callback = staticmethod(_code_language)
        table_infer_header = True

    def convert_del(self, el: Any, text: str, parent_tags: set[str]) -> str:
        text = text.strip()
        if not text:
            return ""
        return f"~~{text}~~"

    convert_s = convert_del
    convert_strike = convert_del

    def convert_input(self, el: Any, text: str, parent_tags: set[str]) -> str:
        # task list items
        if (el.get("type") or "").lower() != "checkbox":
            return ""
        return "[x] " if el.has_attr("checked") else "[ ] "


def html_to_markdown(html: str) -> str:
    """Convert an HTML fragment to Markdown."""
    if not html:
        return ""
    return GfmMarkdownConverter().convert(html)
