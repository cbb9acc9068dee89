from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    """Face of the fabric a row is worked from."""

    RS = "RS"  # right side
    WS = "WS"  # wrong side

    def switch(self, in_round: bool) -> Side:
        """Side of the next row. Worked in the round, every row is on the same side."""
        if in_round:
            return self
        return Side.WS if self is Side.RS else Side.RS
