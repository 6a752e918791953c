from __future__ import annotations

from enum import Enum


class Strategy(str, Enum):
    BIDIRECTIONAL = "bidirectional"
    NETTING = "netting"
    GREEDY = "greedy"
