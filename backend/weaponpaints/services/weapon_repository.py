"""Weapon Repository — SQLAlchemy persistence for weapon configurations.

Invariants:
    - Every statement is built from SQLAlchemy constructs with bound parameters
    - upsert is a single atomic INSERT ... ON CONFLICT/ON DUPLICATE KEY UPDATE
      that replaces every value column (last write wins, no merge)
    - delete reports the affected row count; 0 means nothing was stored
    - Rows are decoded into WeaponConfig here; nothing above this layer sees
      sticker slot strings

Design Decisions:
    - Native conflict-resolving insert per dialect (PostgreSQL, SQLite, MySQL/MariaDB);
      other dialects fall back to SELECT ... FOR UPDATE then write in one transaction
    - populate_existing on reads: the session keeps objects after commit
      (expire_on_commit=False), so reads must refresh them from the row
"""

import logging

from sqlalchemy import select, delete
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from weaponpaints.core.domain_types import SteamId
from weaponpaints.core.serialization import (
    serialize_sticker_slots, deserialize_sticker_slots,
    serialize_keychain, deserialize_keychain,
)
from weaponpaints.core.weapon_config import WeaponConfig
from weaponpaints.models.player_skin import PlayerSkin

logger = logging.getLogger(__name__)

_KEY_COLUMNS = ("steamid", "weapon_team", "weapon_defindex")
_VALUE_COLUMNS = (
    "weapon_paint_id", "weapon_wear", "weapon_seed", "weapon_nametag",
    "weapon_stattrak", "weapon_stattrak_count",
    "weapon_sticker_0", "weapon_sticker_1", "weapon_sticker_2",
    "weapon_sticker_3", "weapon_sticker_4", "weapon_keychain",
)
_ON_CONFLICT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def to_row_values(config: WeaponConfig) -> dict:
    """Encode a config into column values for wp_player_skins."""
    slots = serialize_sticker_slots(config.stickers)
    return {
        "steamid": config.steamid,
        "weapon_team": config.team,
        "weapon_defindex": config.defindex,
        "weapon_paint_id": config.paint_id,
        "weapon_wear": config.wear,
        "weapon_seed": config.seed,
        "weapon_nametag": config.nametag,
        "weapon_stattrak": config.stattrak,
        "weapon_stattrak_count": config.stattrak_count,
        **{f"weapon_sticker_{i}": slot for i, slot in enumerate(slots)},
        "weapon_keychain": serialize_keychain(config.keychain),
    }


def from_row(row: PlayerSkin) -> WeaponConfig:
    """Decode a stored row into a config."""
    return WeaponConfig(
        steamid=SteamId(row.steamid),
        team=row.weapon_team,
        defindex=row.weapon_defindex,
        paint_id=row.weapon_paint_id,
        wear=row.weapon_wear,
        seed=row.weapon_seed,
        nametag=row.weapon_nametag,
        stattrak=bool(row.weapon_stattrak),
        stattrak_count=row.weapon_stattrak_count,
        stickers=tuple(deserialize_sticker_slots(row.sticker_slots)),
        keychain=deserialize_keychain(row.weapon_keychain),
    )


class SqlWeaponRepository:
    """WeaponRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _tag(self, steamid, team=None, defindex=None) -> None:
        """Record the weapon key on the session for failure logging."""
        self.db.info.update(
            steamid=steamid, weapon_team=team, weapon_defindex=defindex,
        )

    async def fetch_all(self, steamid: SteamId) -> list[WeaponConfig]:
        self._tag(steamid)
        result = await self.db.execute(
            select(PlayerSkin)
            .where(PlayerSkin.steamid == steamid)
            .order_by(PlayerSkin.weapon_team, PlayerSkin.weapon_defindex)
            .execution_options(populate_existing=True)
        )
        return [from_row(row) for row in result.scalars().all()]

    async def upsert(self, config: WeaponConfig) -> None:
        self._tag(config.steamid, config.team, config.defindex)
        values = to_row_values(config)
        dialect = self.db.get_bind().dialect.name

        if dialect in _ON_CONFLICT_INSERTS:
            stmt = _ON_CONFLICT_INSERTS[dialect](PlayerSkin).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=list(_KEY_COLUMNS),
                set_={col: stmt.excluded[col] for col in _VALUE_COLUMNS},
            )
            await self.db.execute(stmt)
        elif dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(PlayerSkin).values(**values)
            stmt = stmt.on_duplicate_key_update(
                {col: stmt.inserted[col] for col in _VALUE_COLUMNS},
            )
            await self.db.execute(stmt)
        else:
            await self._locked_upsert(values)

        await self.db.commit()
        logger.info(
            "Weapon configuration saved",
            extra={
                "steamid": config.steamid,
                "weapon_team": config.team,
                "weapon_defindex": config.defindex,
            },
        )

    async def _locked_upsert(self, values: dict) -> None:
        """Emulated upsert for dialects without a conflict-resolving insert."""
        key = tuple(values[col] for col in _KEY_COLUMNS)
        row = await self.db.get(PlayerSkin, key, with_for_update=True)
        if row is None:
            self.db.add(PlayerSkin(**values))
        else:
            for col in _VALUE_COLUMNS:
                setattr(row, col, values[col])
        await self.db.flush()

    async def delete(self, steamid: SteamId, team: int, defindex: int) -> int:
        self._tag(steamid, team, defindex)
        result = await self.db.execute(
            delete(PlayerSkin)
            .where(PlayerSkin.steamid == steamid)
            .where(PlayerSkin.weapon_team == team)
            .where(PlayerSkin.weapon_defindex == defindex)
        )
        await self.db.commit()
        return result.rowcount
