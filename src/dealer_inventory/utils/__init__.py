from .common import (
    clean_price,
    collapse_ws,
    csv_escape,
    format_miles,
    format_price,
    parse_csv_line,
    parse_leading_int,
    split_csv_lines,
    split_lines_keep_blank,
    strip_newlines,
    truncate,
)

__all__ = [
    "clean_price",
    "collapse_ws",
    "csv_escape",
    "format_miles",
    "format_price",
    "parse_csv_line",
    "parse_leading_int",
    "split_csv_lines",
    "split_lines_keep_blank",
    "strip_newlines",
    "truncate",
]
