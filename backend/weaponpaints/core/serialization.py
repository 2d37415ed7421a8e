"""Storage Codecs — fixed-slot sticker strings and keychain strings.

Invariants:
    - serialize_sticker_slots always returns exactly STICKER_SLOTS strings
    - An empty slot is EMPTY_STICKER_SLOT; a slot whose sticker id is 0 is empty
    - deserialize_sticker_slots re-densifies: empty slots are dropped, the
      remaining stickers keep their left-to-right slot order
    - Keychain "no keychain" is stored as NULL, never as a sentinel string
    - Non-integral floats are written with repr(), so they read back exactly

Design Decisions:
    - Semicolon-delimited fields in a fixed order (sticker: id;schema;x;y;wear;scale;rotation,
      keychain: id;x;y;z;seed) — the column format the game server plugin reads
    - Malformed stored values are logged and skipped, not raised: a single bad
      row written by another tool must not make the whole loadout unreadable
"""

import logging
from collections.abc import Sequence

from weaponpaints.core.domain_types import STICKER_SLOTS
from weaponpaints.core.errors import ValidationError
from weaponpaints.core.weapon_config import Sticker, Keychain

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ";"
STICKER_FIELD_COUNT = 7
KEYCHAIN_FIELD_COUNT = 5
EMPTY_STICKER_SLOT = FIELD_SEPARATOR.join(["0"] * STICKER_FIELD_COUNT)


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value)


def _join(values: Sequence[int | float]) -> str:
    return FIELD_SEPARATOR.join(_format_number(v) for v in values)


def _split(raw: str | None, expected: int) -> list[str] | None:
    """Split a stored value into fields. None when blank."""
    if raw is None or not raw.strip():
        return None
    parts = raw.strip().split(FIELD_SEPARATOR)
    if len(parts) != expected:
        raise ValueError(f"expected {expected} fields, got {len(parts)}")
    return parts


# ─── Stickers ────────────────────────────────────────────────────

def serialize_sticker(sticker: Sticker) -> str:
    return _join((
        sticker.id, sticker.schema, sticker.x, sticker.y,
        sticker.wear, sticker.scale, sticker.rotation,
    ))


def serialize_sticker_slots(stickers: Sequence[Sticker]) -> list[str]:
    """Map 0-5 stickers onto exactly 5 slot strings."""
    if len(stickers) > STICKER_SLOTS:
        raise ValidationError(
            f"Maximum {STICKER_SLOTS} stickers allowed per weapon", "stickers",
        )
    slots = [serialize_sticker(s) for s in stickers]
    slots.extend([EMPTY_STICKER_SLOT] * (STICKER_SLOTS - len(slots)))
    return slots


def deserialize_sticker(raw: str | None) -> Sticker | None:
    """Parse one slot. None for an empty slot.

    Raises ValueError on a malformed value.
    """
    parts = _split(raw, STICKER_FIELD_COUNT)
    if parts is None:
        return None
    sticker_id = int(parts[0])
    if sticker_id == 0:
        return None
    return Sticker(
        id=sticker_id,
        schema=int(parts[1]),
        x=float(parts[2]),
        y=float(parts[3]),
        wear=float(parts[4]),
        scale=float(parts[5]),
        rotation=float(parts[6]),
    )


def deserialize_sticker_slots(slots: Sequence[str | None]) -> list[Sticker]:
    stickers = []
    for index, raw in enumerate(slots):
        try:
            sticker = deserialize_sticker(raw)
        except ValueError as e:
            logger.warning(f"Skipping malformed sticker slot {index} ({raw!r}): {e}")
            continue
        if sticker is not None:
            stickers.append(sticker)
    return stickers


# ─── Keychain ────────────────────────────────────────────────────

def serialize_keychain(keychain: Keychain | None) -> str | None:
    if keychain is None:
        return None
    return _join((keychain.id, keychain.x, keychain.y, keychain.z, keychain.seed))


def deserialize_keychain(raw: str | None) -> Keychain | None:
    try:
        parts = _split(raw, KEYCHAIN_FIELD_COUNT)
        if parts is None or int(parts[0]) == 0:
            return None
        return Keychain(
            id=int(parts[0]),
            x=float(parts[1]),
            y=float(parts[2]),
            z=float(parts[3]),
            seed=int(parts[4]),
        )
    except ValueError as e:
        logger.warning(f"Ignoring malformed keychain ({raw!r}): {e}")
        return None
