"""Weapon Schemas — Pydantic wire models for the weapon configuration endpoints.

Invariants:
    - Wire fields are camelCase (paintId, stattrakCount, weaponTeam, ...)
    - Schemas check request SHAPE only (types, required paintId); value ranges
      are checked by core/validation.py so the 400 message names the constraint
    - stickers carries no length bound here: the 5-slot limit is a core rule
    - Request models are strict: no string-to-number or bool-to-int coercion,
      an integer is still accepted where a float is expected

Design Decisions:
    - alias_generator=to_camel with populate_by_name: Python code uses snake_case,
      responses serialize by alias (FastAPI default)
    - Sticker `schema` field is exposed under its wire name via an explicit alias
      (a field literally named `schema` would shadow BaseModel.schema)
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from weaponpaints.core.domain_types import (
    SteamId, DEFAULT_WEAR, DEFAULT_SEED, DEFAULT_STATTRAK_COUNT,
)
from weaponpaints.core.weapon_config import Sticker, Keychain, WeaponConfig


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, strict=True,
    )


class StickerPayload(_CamelModel):
    """One sticker as sent and returned over the wire."""
    id: int
    schema_id: int = Field(0, alias="schema")
    x: float = 0.0
    y: float = 0.0
    wear: float = 0.0
    scale: float = 1.0
    rotation: float = 0.0

    def to_domain(self) -> Sticker:
        return Sticker(
            id=self.id, schema=self.schema_id, x=self.x, y=self.y,
            wear=self.wear, scale=self.scale, rotation=self.rotation,
        )

    @classmethod
    def from_domain(cls, sticker: Sticker) -> "StickerPayload":
        return cls(
            id=sticker.id, schema_id=sticker.schema, x=sticker.x, y=sticker.y,
            wear=sticker.wear, scale=sticker.scale, rotation=sticker.rotation,
        )


class KeychainPayload(_CamelModel):
    """Keychain as sent and returned over the wire."""
    id: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    seed: int = 0

    def to_domain(self) -> Keychain:
        return Keychain(id=self.id, x=self.x, y=self.y, z=self.z, seed=self.seed)

    @classmethod
    def from_domain(cls, keychain: Keychain | None) -> "KeychainPayload | None":
        if keychain is None:
            return None
        return cls(
            id=keychain.id, x=keychain.x, y=keychain.y, z=keychain.z,
            seed=keychain.seed,
        )


class WeaponUpdate(_CamelModel):
    """PUT body. Omitted optional fields take their defaults (wholesale replace)."""
    paint_id: int
    wear: float = DEFAULT_WEAR
    seed: int = DEFAULT_SEED
    nametag: str | None = None
    stattrak: bool = False
    stattrak_count: int = DEFAULT_STATTRAK_COUNT
    stickers: list[StickerPayload] = Field(default_factory=list)
    keychain: KeychainPayload | None = None

    def to_config(
        self, steamid: SteamId, team: int, defindex: int,
    ) -> WeaponConfig:
        return WeaponConfig(
            steamid=steamid,
            team=team,
            defindex=defindex,
            paint_id=self.paint_id,
            wear=self.wear,
            seed=self.seed,
            nametag=self.nametag,
            stattrak=self.stattrak,
            stattrak_count=self.stattrak_count,
            stickers=tuple(s.to_domain() for s in self.stickers),
            keychain=self.keychain.to_domain() if self.keychain else None,
        )


class WeaponResponse(_CamelModel):
    """A stored weapon configuration."""
    model_config = ConfigDict(strict=False)

    steamid: str
    weapon_team: int
    weapon_defindex: int
    paint_id: int
    wear: float
    seed: int
    nametag: str | None
    stattrak: bool
    stattrak_count: int
    stickers: list[StickerPayload]
    keychain: KeychainPayload | None

    @classmethod
    def from_config(cls, config: WeaponConfig) -> "WeaponResponse":
        return cls(
            steamid=config.steamid,
            weapon_team=config.team,
            weapon_defindex=config.defindex,
            paint_id=config.paint_id,
            wear=config.wear,
            seed=config.seed,
            nametag=config.nametag,
            stattrak=config.stattrak,
            stattrak_count=config.stattrak_count,
            stickers=[StickerPayload.from_domain(s) for s in config.stickers],
            keychain=KeychainPayload.from_domain(config.keychain),
        )


class WeaponListResponse(BaseModel):
    weapons: list[WeaponResponse]


class WeaponSavedResponse(BaseModel):
    message: str
    weapon: WeaponResponse


class MessageResponse(BaseModel):
    message: str
