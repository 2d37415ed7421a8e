"""Field Validators — pure range and shape checks for weapon configurations.

Invariants:
    - Every validator takes one raw value and returns None or raises ValidationError
    - ValidationError.message names the offending field and its constraint
    - bool is never accepted where an integer or number is expected
    - Validators run before any serialization or SQL (fail fast, no partial writes)

Design Decisions:
    - Plain functions over a validation framework: each check is one branch and
      the messages are part of the public API (400 responses echo them)
    - validate_weapon_config applies checks in a fixed order; first failure wins
"""

import math
import re
from collections.abc import Sequence

from weaponpaints.core.domain_types import (
    Team, STICKER_SLOTS, NAMETAG_MAX_LENGTH, SEED_MIN, SEED_MAX,
    WEAR_MIN, WEAR_MAX, STICKER_SCALE_MAX, STICKER_ROTATION_MAX,
    STATTRAK_COUNT_MAX, INT_COLUMN_MAX,
)
from weaponpaints.core.errors import ValidationError
from weaponpaints.core.weapon_config import Sticker, Keychain, WeaponConfig

_NAMETAG_PATTERN = re.compile(
    r"[a-zA-Z0-9\s\-_!@#$%^&*()\[\]{}+=|\\:;\"'<>,.?/~`]*", re.ASCII,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_int_between(value: object, low: int, high: int = INT_COLUMN_MAX) -> bool:
    return _is_int(value) and low <= value <= high


def _is_number(value: object) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _require_number_between(
    value: object, low: float, high: float, field: str, label: str,
) -> None:
    if not _is_number(value) or not low <= value <= high:
        raise ValidationError(
            f"{label} must be a number between {low:g} and {high:g}", field,
        )


# ─── Weapon key ──────────────────────────────────────────────────

def validate_team(team: object) -> None:
    if not _is_int(team) or team not in (Team.TERRORIST, Team.COUNTER_TERRORIST):
        raise ValidationError(
            "Team must be 2 (Terrorist) or 3 (Counter-Terrorist)", "team",
        )


def validate_weapon_defindex(defindex: object) -> None:
    if not _is_int_between(defindex, 1):
        raise ValidationError(
            "Weapon defindex must be a positive integer", "defindex",
        )


def validate_weapon_key(team: object, defindex: object) -> None:
    validate_team(team)
    validate_weapon_defindex(defindex)


# ─── Skin fields ─────────────────────────────────────────────────

def validate_paint_id(paint_id: object) -> None:
    if not _is_int_between(paint_id, 0):
        raise ValidationError(
            "Paint ID must be a non-negative integer", "paintId",
        )


def validate_wear(wear: object) -> None:
    _require_number_between(wear, WEAR_MIN, WEAR_MAX, "wear", "Wear")


def validate_seed(seed: object) -> None:
    if not _is_int(seed) or not SEED_MIN <= seed <= SEED_MAX:
        raise ValidationError(
            f"Seed must be an integer between {SEED_MIN} and {SEED_MAX}", "seed",
        )


def validate_nametag(nametag: object) -> None:
    """None means no nametag. Otherwise a bounded, allow-listed string."""
    if nametag is None:
        return
    if not isinstance(nametag, str):
        raise ValidationError("Nametag must be a string", "nametag")
    if len(nametag) > NAMETAG_MAX_LENGTH:
        raise ValidationError(
            f"Nametag must be at most {NAMETAG_MAX_LENGTH} characters", "nametag",
        )
    if not _NAMETAG_PATTERN.fullmatch(nametag):
        raise ValidationError(
            "Nametag contains invalid characters", "nametag",
        )


def validate_stattrak_counter(count: object) -> None:
    if not _is_int(count) or not 0 <= count <= STATTRAK_COUNT_MAX:
        raise ValidationError(
            "StatTrak count must be a non-negative integer", "stattrakCount",
        )


# ─── Attachments ─────────────────────────────────────────────────

def validate_sticker(sticker: Sticker, index: int = 0) -> None:
    """Check one sticker's fields; messages carry the sticker's position."""
    prefix = f"Sticker {index}"
    field = f"stickers[{index}]"
    if not _is_int_between(sticker.id, 1):
        raise ValidationError(f"{prefix}: id must be a positive integer", field)
    if not _is_int_between(sticker.schema, 0):
        raise ValidationError(
            f"{prefix}: schema must be a non-negative integer", field,
        )
    _require_number_between(sticker.x, 0.0, 1.0, field, f"{prefix}: x")
    _require_number_between(sticker.y, 0.0, 1.0, field, f"{prefix}: y")
    _require_number_between(sticker.wear, WEAR_MIN, WEAR_MAX, field, f"{prefix}: wear")
    if not _is_number(sticker.scale) or not 0 < sticker.scale <= STICKER_SCALE_MAX:
        raise ValidationError(
            f"{prefix}: scale must be greater than 0 and at most "
            f"{STICKER_SCALE_MAX:g}",
            field,
        )
    _require_number_between(
        sticker.rotation, 0.0, STICKER_ROTATION_MAX, field, f"{prefix}: rotation",
    )


def validate_stickers(stickers: Sequence[Sticker]) -> None:
    if len(stickers) > STICKER_SLOTS:
        raise ValidationError(
            f"Maximum {STICKER_SLOTS} stickers allowed per weapon", "stickers",
        )
    for index, sticker in enumerate(stickers):
        validate_sticker(sticker, index)


def validate_keychain(keychain: Keychain | None) -> None:
    if keychain is None:
        return
    if not _is_int_between(keychain.id, 1):
        raise ValidationError("Keychain id must be a positive integer", "keychain")
    for axis in ("x", "y", "z"):
        if not _is_number(getattr(keychain, axis)):
            raise ValidationError(
                f"Keychain {axis} offset must be a finite number", "keychain",
            )
    if not _is_int_between(keychain.seed, 0):
        raise ValidationError(
            "Keychain seed must be a non-negative integer", "keychain",
        )


# ─── Whole configuration ─────────────────────────────────────────

def validate_weapon_config(config: WeaponConfig) -> None:
    """Run every field check in handler order. Raises on the first failure."""
    validate_weapon_key(config.team, config.defindex)
    validate_paint_id(config.paint_id)
    validate_wear(config.wear)
    validate_seed(config.seed)
    validate_nametag(config.nametag)
    if config.stattrak:
        validate_stattrak_counter(config.stattrak_count)
    validate_stickers(config.stickers)
    validate_keychain(config.keychain)
