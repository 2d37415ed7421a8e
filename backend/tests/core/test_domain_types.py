"""Domain Types — verifies identity types, the Team enum, and limits.

Tests:
    - SteamId wraps str
    - Team has exactly two members with the game's team numbers
    - Sticker slot count is 5
"""

from weaponpaints.core.domain_types import SteamId, Team, STICKER_SLOTS


def test_steam_id_wraps_str():
    assert SteamId("76561198001234567") == "76561198001234567"


def test_team_has_exactly_two_sides():
    assert len(Team) == 2
    assert Team.TERRORIST == 2
    assert Team.COUNTER_TERRORIST == 3


def test_team_from_int():
    assert Team(3) is Team.COUNTER_TERRORIST


def test_five_sticker_slots():
    assert STICKER_SLOTS == 5
