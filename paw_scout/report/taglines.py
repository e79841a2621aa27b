# paw_scout/report/taglines.py
"""Decorative footer text for the HTML page. Has no bearing on report contents."""
from __future__ import annotations

import random
from typing import Optional

TAGLINES = (
    "powered by kibble",
    "powered by belly rubs",
    "powered by squeaky toys",
    "powered by tennis balls",
    "powered by catnip",
    "powered by long walks",
    "powered by treats",
)

# seeded from the OS once per process
_rng = random.Random()


def powered_by(rng: Optional[random.Random] = None) -> str:
    return (rng or _rng).choice(TAGLINES)
