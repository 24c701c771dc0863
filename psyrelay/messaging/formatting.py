"""Markdown-like answer text to Telegram HTML parse mode."""

from __future__ import annotations

import re

# Applied in this order; each rule sees the previous rule's output.
RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^## (.*)", re.MULTILINE), r"<b>\1</b>"),
    (re.compile(r"\*\*(.*?)\*\*"), r"<b>\1</b>"),
    (re.compile(r"__(.*?)__"), r"<u>\1</u>"),
    (re.compile(r"\*(.*)\*"), r"<i>\1</i>"),
    (re.compile(r"_(.*)_"), r"<i>\1</i>"),
    (re.compile(r"\+\+(.*?)\+\+"), r"<u>\1</u>"),
    (re.compile(r"~~(.*?)~~"), r"<s>\1</s>"),
    (re.compile(r"\|\|(.*?)\|\|"), r'<span class="tg-spoiler">\1</span>'),
    (re.compile(r"\[(.*?)\]\((https?://.*?)\)"), r'<a href="\2">\1</a>'),
    (re.compile(r"\[(.*?)\]\(tg://user\?id=(\d+)\)"), r'<a href="tg://user?id=\2">\1</a>'),
    (re.compile(r"```([^`]*)```"), r"<pre>\1</pre>"),
    (re.compile(r"`([^`]+)`"), r"<code>\1</code>"),
    (re.compile(r"^> (.*)", re.MULTILINE), r"<blockquote>\1</blockquote>"),
)


def markdown_to_telegram_html(text: str) -> str:
    """Rewrite recognised markup as Telegram HTML.

    This is not CommonMark: nothing is escaped, and unmatched markup
    characters are left as they are.
    """
    for pattern, replacement in RULES:
        text = pattern.sub(replacement, text)
    return text
