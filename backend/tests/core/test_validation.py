"""Field Validators — verifies range/shape checks and their messages.

Tests:
    - Team accepts exactly 2 and 3
    - Numeric validators reject bool, NaN, infinity, and out-of-range values
    - Nametag allow-list and length bound
    - Sticker collection bound (5) and per-sticker field ranges
    - validate_weapon_config reports the first failing field
"""

import math

import pytest

from weaponpaints.core.errors import ValidationError
from weaponpaints.core.validation import (
    validate_team, validate_weapon_defindex, validate_weapon_key,
    validate_paint_id, validate_wear, validate_seed, validate_nametag,
    validate_stattrak_counter, validate_sticker, validate_stickers,
    validate_keychain, validate_weapon_config,
)
from weaponpaints.core.weapon_config import Sticker, Keychain, WeaponConfig


def _sticker(**overrides) -> Sticker:
    fields = dict(id=1, schema=0, x=0.5, y=0.5, wear=0.0, scale=1.0, rotation=0.0)
    fields.update(overrides)
    return Sticker(**fields)


# --- Team / defindex ----------------------------------------------------------

def test_team_accepts_both_sides():
    validate_team(2)
    validate_team(3)


def test_team_rejects_other_values():
    for team in (0, 1, 4, 5, -2, 2.0, True, "2", None):
        with pytest.raises(ValidationError) as exc_info:
            validate_team(team)
        assert exc_info.value.field == "team"
        assert "Team must be 2" in exc_info.value.message


def test_defindex_must_be_positive_integer():
    validate_weapon_defindex(1)
    validate_weapon_defindex(7)
    for defindex in (0, -1, 1.5, True, None):
        with pytest.raises(ValidationError, match="defindex"):
            validate_weapon_defindex(defindex)


def test_weapon_key_checks_team_before_defindex():
    with pytest.raises(ValidationError) as exc_info:
        validate_weapon_key(5, 0)
    assert exc_info.value.field == "team"


# --- Skin fields --------------------------------------------------------------

def test_paint_id_accepts_zero_and_rejects_negative():
    validate_paint_id(0)
    validate_paint_id(38)
    with pytest.raises(ValidationError, match="Paint ID"):
        validate_paint_id(-1)
    with pytest.raises(ValidationError):
        validate_paint_id(None)


def test_wear_closed_interval():
    validate_wear(0)
    validate_wear(0.0)
    validate_wear(0.15)
    validate_wear(1.0)


def test_wear_rejects_out_of_range_and_non_finite():
    for wear in (-0.0001, 1.0001, 1.5, math.nan, math.inf, True, "0.5", None):
        with pytest.raises(ValidationError) as exc_info:
            validate_wear(wear)
        assert exc_info.value.field == "wear"


def test_seed_bounds():
    validate_seed(0)
    validate_seed(1000)
    for seed in (-1, 1001, 1500, 10.5, False):
        with pytest.raises(ValidationError, match="Seed"):
            validate_seed(seed)


def test_nametag_none_is_valid():
    validate_nametag(None)


def test_nametag_allows_letters_digits_and_symbols():
    validate_nametag("Test Gun")
    validate_nametag("AK-47_#1 (mine) [v2] {x} +=|\\:;\"'<>,.?/~`!@$%^&*")
    validate_nametag("x" * 128)


def test_nametag_rejects_too_long():
    with pytest.raises(ValidationError, match="at most 128"):
        validate_nametag("x" * 129)


def test_nametag_rejects_characters_outside_allow_list():
    for nametag in ("héllo", "gun™", "名前", "emoji 🔥"):
        with pytest.raises(ValidationError, match="invalid characters"):
            validate_nametag(nametag)


def test_nametag_rejects_non_string():
    with pytest.raises(ValidationError, match="must be a string"):
        validate_nametag(123)


def test_stattrak_counter():
    validate_stattrak_counter(0)
    validate_stattrak_counter(999_999)
    for count in (-1, 1.5, True, 2**31):
        with pytest.raises(ValidationError, match="StatTrak"):
            validate_stattrak_counter(count)


# --- Stickers -----------------------------------------------------------------

def test_stickers_up_to_five_accepted():
    for n in range(6):
        validate_stickers([_sticker(id=i + 1) for i in range(n)])


def test_six_stickers_rejected_with_slot_limit_message():
    with pytest.raises(ValidationError) as exc_info:
        validate_stickers([_sticker()] * 6)
    assert "Maximum 5 stickers" in exc_info.value.message
    assert exc_info.value.field == "stickers"


def test_sticker_field_ranges():
    validate_sticker(_sticker(x=0.0, y=1.0, wear=1.0, scale=5.0, rotation=360.0))
    bad = [
        dict(id=0), dict(id=-3), dict(schema=-1),
        dict(x=1.1), dict(y=-0.1), dict(wear=2.0),
        dict(scale=0.0), dict(scale=5.5), dict(rotation=361.0),
        dict(rotation=math.nan),
    ]
    for overrides in bad:
        with pytest.raises(ValidationError):
            validate_sticker(_sticker(**overrides))


def test_sticker_message_names_position():
    with pytest.raises(ValidationError) as exc_info:
        validate_stickers([_sticker(), _sticker(rotation=400.0)])
    assert exc_info.value.message.startswith("Sticker 1: rotation")
    assert exc_info.value.field == "stickers[1]"


# --- Keychain -----------------------------------------------------------------

def test_keychain_optional_and_offsets_unbounded():
    validate_keychain(None)
    validate_keychain(Keychain(id=1, x=-12.5, y=40.0, z=3.25, seed=100))


def test_keychain_rejects_bad_fields():
    for keychain in (
        Keychain(id=0),
        Keychain(id=1, seed=-1),
        Keychain(id=1, x=math.inf),
    ):
        with pytest.raises(ValidationError):
            validate_keychain(keychain)


# --- Whole configuration ------------------------------------------------------

def _config(**overrides) -> WeaponConfig:
    fields = dict(steamid="76561198001234567", team=2, defindex=7, paint_id=38)
    fields.update(overrides)
    return WeaponConfig(**fields)


def test_weapon_config_with_defaults_is_valid():
    validate_weapon_config(_config())


def test_stattrak_count_only_checked_when_stattrak_enabled():
    validate_weapon_config(_config(stattrak=False, stattrak_count=-5))
    with pytest.raises(ValidationError, match="StatTrak"):
        validate_weapon_config(_config(stattrak=True, stattrak_count=-5))


def test_invalid_team_rejected_even_when_other_fields_are_valid():
    with pytest.raises(ValidationError) as exc_info:
        validate_weapon_config(_config(team=5))
    assert exc_info.value.field == "team"


def test_first_failure_wins():
    with pytest.raises(ValidationError) as exc_info:
        validate_weapon_config(_config(wear=2.0, seed=5000))
    assert exc_info.value.field == "wear"


def test_validation_error_maps_to_400():
    with pytest.raises(ValidationError) as exc_info:
        validate_seed(1500)
    assert exc_info.value.http_status == 400
    assert exc_info.value.to_response() == {
        "error": "Validation error",
        "message": "Seed must be an integer between 0 and 1000",
    }


def test_integer_fields_capped_at_column_width():
    validate_paint_id(2_147_483_647)
    validate_weapon_defindex(2_147_483_647)
    with pytest.raises(ValidationError, match="Paint ID"):
        validate_paint_id(2**64)
    with pytest.raises(ValidationError, match="defindex"):
        validate_weapon_defindex(2**31)
    with pytest.raises(ValidationError, match="Sticker 0: id"):
        validate_sticker(_sticker(id=2**31))
    with pytest.raises(ValidationError, match="Sticker 0: schema"):
        validate_sticker(_sticker(schema=2**40))
    with pytest.raises(ValidationError, match="Keychain id"):
        validate_keychain(Keychain(id=10**300))
    with pytest.raises(ValidationError, match="Keychain seed"):
        validate_keychain(Keychain(id=1, seed=2**31))
