from __future__ import annotations

from typing import Callable

LogFunc = Callable[[str], None]
CompleteFunc = Callable[[str], str]
SleepFunc = Callable[[float], None]
