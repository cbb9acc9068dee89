"""
Core type definitions for the stitch catalog.

Stitch is the canonical vocabulary: each member's value is the shorthand name
it is written as in a pattern line. StitchEntry is loaded from the YAML width
table and is frozen after startup and never written to at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# ── Enums ──────────────────────────────────────────────────────────────────────


class Stitch(str, Enum):
    """Every stitch token the line grammar can produce."""

    # Single
    K = "k"
    P = "p"
    K2TOG = "k2tog"
    P2TOG = "p2tog"
    SSK = "ssk"
    SSP = "ssp"
    SL_KWISE = "sl kwise"
    SL_PWISE = "sl pwise"
    YO = "yo"
    BO = "bo"
    MR = "mr"
    ML = "ml"
    M_KWISE = "m kwise"
    M_PWISE = "m pwise"
    KFB = "kfb"
    KBF = "kbf"
    PFB = "pfb"
    PBF = "pbf"
    KTBL = "ktbl"
    PTBL = "ptbl"
    NO_STITCH = "nostitch"  # padding placeholder
    BOBBLE = "bobble"
    BEAD = "bead"

    # Dual
    LCF1 = "1lcf"
    RCB1 = "1rcb"

    # Quad
    LCF2 = "2lcf"
    RCB2 = "2rcb"

    # Six
    LCF3 = "3lcf"
    RCB3 = "3rcb"

    # Eight
    LCF4 = "4lcf"
    RCB4 = "4rcb"


# Display widths a catalog entry may declare.
ALLOWED_WIDTHS: frozenset[int] = frozenset({1, 2, 4, 6, 8})


# ── Catalog entry type (frozen, loaded from YAML) ─────────────────────────────


@dataclass(frozen=True)
class StitchEntry:
    id: Stitch
    width: int
    description: str = ""
