import re

_WS_RE = re.compile(r"\s+")


def clean_text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def hyphenate(text: str) -> str:
    # "Chicken Tikka  Masala" -> "Chicken-Tikka-Masala"
    return _WS_RE.sub("-", clean_text(text))
