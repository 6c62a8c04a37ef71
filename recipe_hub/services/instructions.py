# recipe_hub/services/instructions.py
from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple

from bs4 import BeautifulSoup

_LINE_BREAK_RE = re.compile(r"\r?\n")
_NUMBER_MARKER_RE = re.compile(r"^\s*\d+\s*[.)]\s*")
_SENTENCE_RE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+$")
_BLOCK_TAGS = ["p", "div", "h1", "h2", "h3", "h4", "h5", "h6"]

Rule = Callable[[str, List[str]], Optional[List[str]]]


def _soup(text: str) -> BeautifulSoup:
    return BeautifulSoup(text, "html.parser")


def _plain_text(text: str) -> str:
    soup = _soup(text)
    if soup.find() is None:
        return text
    # Block boundaries become line breaks; inline tags (<b>, <a>) do not.
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for block in soup.find_all(_BLOCK_TAGS):
        block.append("\n")
    return soup.get_text()


def _non_blank_lines(text: str) -> List[str]:
    return [line.strip() for line in _LINE_BREAK_RE.split(text) if line.strip()]


def _markup_list(raw: str, lines: List[str]) -> Optional[List[str]]:
    items = _soup(raw).find_all("li")
    steps = [li.get_text().strip() for li in items]
    steps = [s for s in steps if s]
    return steps or None


def _numbered_lines(raw: str, lines: List[str]) -> Optional[List[str]]:
    if len(lines) <= 1 or not _NUMBER_MARKER_RE.match(lines[0]):
        return None
    steps = [_NUMBER_MARKER_RE.sub("", line, count=1).strip() for line in lines]
    return [s for s in steps if s] or None


def _plain_lines(raw: str, lines: List[str]) -> Optional[List[str]]:
    if len(lines) <= 1:
        return None
    return lines


def _prose(raw: str, lines: List[str]) -> Optional[List[str]]:
    text = " ".join(lines)
    sentences = [m.group(0).strip() for m in _SENTENCE_RE.finditer(text)]
    return [s for s in sentences if s] or [text]


# Ordered: the first rule returning steps wins; the last one is total.
RULES: Tuple[Tuple[str, Rule], ...] = (
    ("markup_list", _markup_list),
    ("numbered_lines", _numbered_lines),
    ("plain_lines", _plain_lines),
    ("prose", _prose),
)


def parse_instructions(text: Optional[str]) -> List[str]:
    """
    Split free-form instruction text into ordered steps.

    Handles HTML lists, numbered lines ("1. ", "2) "), unnumbered lines and
    single-block prose. Empty input gives an empty list; any other input
    gives at least one step.
    """
    if not text or not text.strip():
        return []

    lines = _non_blank_lines(_plain_text(text))
    if not lines:
        # markup without any text content is kept as a single step
        return [text.strip()]

    # RULES ends with a total rule, so the loop always breaks with steps.
    for _name, rule in RULES:
        steps = rule(text, lines)
        if steps:
            break
    return steps
