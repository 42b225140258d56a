from __future__ import annotations

import datetime
import sys


def log(message: str) -> None:
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {message}")


def error(message: str) -> None:
    print(f"ERROR: {message}", file=sys.stderr)
