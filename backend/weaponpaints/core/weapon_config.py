"""Weapon Configuration — pure in-memory representation of a player's weapon loadout.

Invariants:
    - WeaponKey (steamid, team, defindex) identifies at most one stored configuration
    - stickers is an ordered tuple; position in the tuple is the slot order
    - keychain is None when no keychain is attached

Design Decisions:
    - Frozen dataclasses: a config is a value, handlers build a new one per request
    - Tuples over lists for stickers: hashable, safe to share between layers
    - No storage or wire concerns here (serialization.py and schemas/ own those)
"""

from dataclasses import dataclass, field, replace

from weaponpaints.core.domain_types import (
    SteamId, DEFAULT_WEAR, DEFAULT_SEED, DEFAULT_STATTRAK_COUNT,
)


@dataclass(frozen=True)
class Sticker:
    """A decorative sticker in one of the weapon's 5 slots."""
    id: int
    schema: int = 0
    x: float = 0.0
    y: float = 0.0
    wear: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0


@dataclass(frozen=True)
class Keychain:
    """A charm attachment with its own position offset and pattern seed."""
    id: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    seed: int = 0


@dataclass(frozen=True)
class WeaponKey:
    steamid: SteamId
    team: int
    defindex: int


@dataclass(frozen=True)
class WeaponConfig:
    """One weapon's cosmetic configuration for one team of one player."""
    steamid: SteamId
    team: int
    defindex: int
    paint_id: int
    wear: float = DEFAULT_WEAR
    seed: int = DEFAULT_SEED
    nametag: str | None = None
    stattrak: bool = False
    stattrak_count: int = DEFAULT_STATTRAK_COUNT
    stickers: tuple[Sticker, ...] = field(default_factory=tuple)
    keychain: Keychain | None = None

    @property
    def key(self) -> WeaponKey:
        return WeaponKey(self.steamid, self.team, self.defindex)

    def normalized(self) -> "WeaponConfig":
        """Return the config as it is stored.

        The StatTrak counter is only meaningful while StatTrak is enabled,
        so it is zeroed when the flag is off. An empty nametag means no nametag.
        """
        return replace(
            self,
            stattrak_count=self.stattrak_count if self.stattrak else 0,
            nametag=self.nametag or None,
        )
