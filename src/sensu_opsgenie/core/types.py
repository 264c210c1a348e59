"""Domain types shared across the handler."""

from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    """Opsgenie alert priority. P1 is the most urgent."""

    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"
    P5 = "P5"
