"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SteamId wraps str — the owner identity is opaque, never parsed as a number
    - Team has exactly two members (2 = Terrorist, 3 = Counter-Terrorist)
    - STICKER_SLOTS is the fixed number of sticker columns per stored weapon

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - IntEnum for Team: the wire and storage value is the game's own team number
"""

from enum import IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SteamId = NewType("SteamId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Team(IntEnum):
    """The two playable sides; each has independently configured cosmetics."""
    TERRORIST = 2
    COUNTER_TERRORIST = 3


# ─── Limits ──────────────────────────────────────────────────────

STICKER_SLOTS = 5
NAMETAG_MAX_LENGTH = 128
SEED_MIN = 0
SEED_MAX = 1000
WEAR_MIN = 0.0
WEAR_MAX = 1.0
STICKER_SCALE_MAX = 5.0
STICKER_ROTATION_MAX = 360.0
INT_COLUMN_MAX = 2_147_483_647  # signed 32-bit INTEGER column
STATTRAK_COUNT_MAX = INT_COLUMN_MAX


# ─── Defaults applied when a PUT omits a field ───────────────────

DEFAULT_WEAR = 0.000001
DEFAULT_SEED = 0
DEFAULT_STATTRAK_COUNT = 0
