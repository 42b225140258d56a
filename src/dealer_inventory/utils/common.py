from __future__ import annotations

import re

_MULTI_WS_RE = re.compile(r"\s{2,}")
_NEWLINE_RE = re.compile(r"[\r\n]+")
_LINE_SPLIT_RE = re.compile(r"\r?\n")
_NON_PRICE_RE = re.compile(r"[^0-9.]")
_LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def parse_csv_line(line: str, *, keep_quotes: bool = False) -> list[str]:
    """Split one CSV line on commas that are outside double quotes.

    A double quote only toggles the in-quotes state; doubled quotes (``""``) are
    not unescaped. With ``keep_quotes=False`` the quote characters are dropped
    and each field is stripped. With ``keep_quotes=True`` fields are returned
    byte-for-byte so they can be re-joined with ``","``.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
            if keep_quotes:
                current.append(ch)
        elif ch == "," and not in_quotes:
            fields.append(_finish_field(current, keep_quotes))
            current = []
        else:
            current.append(ch)
    fields.append(_finish_field(current, keep_quotes))
    return fields


def _finish_field(chars: list[str], keep_quotes: bool) -> str:
    value = "".join(chars)
    return value if keep_quotes else value.strip()


def split_csv_lines(text: str) -> list[str]:
    # CRLF or LF; blank lines dropped
    return [line for line in _LINE_SPLIT_RE.split(text or "") if line.strip()]


def split_lines_keep_blank(text: str) -> list[str]:
    return _LINE_SPLIT_RE.split(text or "")


def csv_escape(value: object) -> str:
    """RFC 4180 field escaping: quote when the value holds a comma, quote or line break."""
    if value is None:
        return ""
    s = str(value)
    if any(ch in s for ch in (",", '"', "\n", "\r")):
        return '"' + s.replace('"', '""') + '"'
    return s


def clean_price(value: str | None) -> float:
    """'$22,500.00' -> 22500.0; anything unparseable is 0."""
    if not value:
        return 0.0
    digits = _NON_PRICE_RE.sub("", value)
    match = _LEADING_FLOAT_RE.match(digits)
    if not match:
        return 0.0
    return float(match.group(0))


def parse_leading_int(value: str | None) -> int | None:
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


def format_miles(value: str | None) -> str:
    """'45123' -> '45,123 miles'; empty or non-numeric mileage gives ''."""
    miles = parse_leading_int(value)
    if miles is None:
        return ""
    return f"{miles:,} miles"


def format_price(amount: float, currency: str) -> str:
    return f"{amount:.2f} {currency}"


def collapse_ws(text: str) -> str:
    return _MULTI_WS_RE.sub(" ", text or "")


def strip_newlines(text: str) -> str:
    return _NEWLINE_RE.sub(" ", text or "")


def truncate(text: str, max_chars: int, suffix: str = "...") -> str:
    if len(text) > max_chars:
        return text[:max_chars] + suffix
    return text
