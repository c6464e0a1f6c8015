"""Conversions between note body formats and plain text."""

import html
import re

import markdown
from bs4 import BeautifulSoup
from markdownify import markdownify as md
from tabulate import tabulate

from .config import BULLET, PRE_STYLE


def _table_to_text(table):
    thead = table.find("thead")
    if thead:
        headers = [th.get_text(strip=True) for th in thead.find_all("th")]
    else:
        # first row doubles as the header
        first_row = table.find("tr")
        headers = [c.get_text(strip=True) for c in first_row.find_all(["th", "td"])] if first_row else []

    trs = table.find_all("tr")
    if thead:
        trs = [tr for tr in trs if tr.find_parent("thead") is None]
    else:
        trs = trs[1:]

    rows = []
    for tr in trs:
        cells = [td.get_text(strip=True) for td in tr.find_all(["td", "th"])]
        if cells:
            rows.append(cells)

    return tabulate(rows, headers=headers, tablefmt="github")


def markdown_to_plain_text(md_text):
    """
    Convert Markdown to readable plain text:
      - Bullet points for list items
      - Uppercased headings + underlines
      - Tables rendered with tabulate
      - Checkboxes prettified
      - ANSI codes stripped
      - At most one blank line between blocks
    """
    html_str = markdown.markdown(md_text, extensions=["tables"])
    soup = BeautifulSoup(html_str, "html.parser")

    for li in soup.find_all("li"):
        li.insert_before(BULLET)
        li.insert_after("\n")

    for heading in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
        text = heading.get_text(separator=" ", strip=True)
        underline = "-" * len(text)
        heading.string = f"\n{text.upper()}\n{underline}\n"

    for table in soup.find_all("table"):
        table.replace_with("\n" + _table_to_text(table) + "\n")

    text = soup.get_text()

    text = (text
            .replace("- [ ]", "☐")
            .replace("[ ]", "☐")
            .replace("- [x]", "☑")
            .replace("[x]", "☑"))

    text = re.sub(r"\x1b\[[0-9;]*m", "", text)
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()


def html_to_plain_text(html_str):
    """Convert an HTML note body (e.g. a rich clipboard entry) to plain text."""
    return markdown_to_plain_text(md(html_str, heading_style="ATX", bullets="-"))


def to_html_preserving_newlines(plain_text):
    """
    Wrap plain text in a <pre> that keeps line breaks and spacing.
    HTML entities are escaped so text is never read as markup.
    """
    escaped = html.escape(plain_text)
    return f'<pre style="{PRE_STYLE}">{escaped}</pre>'
