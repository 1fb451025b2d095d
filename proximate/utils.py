import math
import re
import unicodedata
from typing import Iterable, Optional

_NUMBER = re.compile(r"\d+(?:\.\d+)?")

def normalize_text(value) -> str:
    """Minúsculas + NFKC. Cualquier cosa que no sea str -> ''."""
    if not isinstance(value, str):
        return ""
    return unicodedata.normalize("NFKC", value).lower()

def first_number(text: str, *, allow_decimal: bool = False) -> Optional[float]:
    if not text:
        return None
    m = _NUMBER.search(text) if allow_decimal else re.search(r"\d+", text)
    if not m:
        return None
    n = float(m.group(0))
    if not math.isfinite(n):
        # "999...9" con cientos de dígitos desborda a inf
        return None
    return int(n) if n.is_integer() else n

def format_number(n: float) -> str:
    """Entero sin decimales, sin notación científica: 1250000 -> "1250000", 0.5 -> "0.5"."""
    return str(int(n)) if float(n).is_integer() else str(n)

def unique(values: Iterable) -> list:
    out: list = []
    for v in values:
        if v not in out:
            out.append(v)
    return out
