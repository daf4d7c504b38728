"""Turn Markdown into styled terminal text."""

from __future__ import annotations

import re

import markdown

from datapad.style import Style

_H1_STYLE = Style(bold=True, foreground="#FF0000", margin_bottom=1)
_H2_STYLE = Style(bold=True, foreground="#FF5500", margin_bottom=1)
_H3_STYLE = Style(bold=True, foreground="#FFAA00")
_BOLD_STYLE = Style(bold=True)
_ITALIC_STYLE = Style(italic=True)
_CODE_STYLE = Style(background="#333", foreground="#FFF")

_STYLED_TAGS = [
    (re.compile(r"<h1[^>]*>(.*?)</h1>"), _H1_STYLE),
    (re.compile(r"<h2[^>]*>(.*?)</h2>"), _H2_STYLE),
    (re.compile(r"<h3[^>]*>(.*?)</h3>"), _H3_STYLE),
    (re.compile(r"<(?:strong|b)[^>]*>(.*?)</(?:strong|b)>"), _BOLD_STYLE),
    (re.compile(r"<(?:em|i)[^>]*>(.*?)</(?:em|i)>"), _ITALIC_STYLE),
    (re.compile(r"<code[^>]*>(.*?)</code>"), _CODE_STYLE),
]
_LIST_ITEM_RE = re.compile(r"<li[^>]*>(.*?)</li>")
_LINK_RE = re.compile(r'<a[^>]*href="([^"]*)"[^>]*>(.*?)</a>')
_TAG_RE = re.compile(r"<[^>]*>")
_ENTITIES = [("&lt;", "<"), ("&gt;", ">"), ("&amp;", "&"), ("&quot;", '"')]


def render_markdown(content: str) -> str:
    """Render Markdown as text with terminal styling for common elements."""
    if not content:
        return ""
    html = markdown.markdown(content)

    for pattern, style in _STYLED_TAGS:
        html = pattern.sub(lambda match, style=style: style.render(match.group(1)), html)

    for tag, replacement in (("<ul>", ""), ("</ul>", "\n"), ("<ol>", ""), ("</ol>", "\n")):
        html = html.replace(tag, replacement)
    html = _LIST_ITEM_RE.sub(lambda match: f"• {match.group(1)}\n", html)

    html = html.replace("<p>", "").replace("</p>", "\n\n")
    html = _LINK_RE.sub(lambda match: f"{match.group(2)} ({match.group(1)})", html)
    html = html.replace("\n\n\n", "\n\n")
    html = _TAG_RE.sub("", html)

    for entity, char in _ENTITIES:
        html = html.replace(entity, char)
    return html