"""Weapon Loadout Service — validate, normalize, persist weapon configurations.

Invariants:
    - Validation runs before any repository call (fail fast, no partial writes)
    - The returned config is the one that was stored (normalized)
    - Deleting a key with nothing stored raises ResourceNotFoundError

Design Decisions:
    - Depends on the WeaponRepository protocol, not on SQLAlchemy: routes wire
      the SQL implementation, tests can pass any object with the same methods
"""

import logging

from weaponpaints.core.domain_types import SteamId
from weaponpaints.core.errors import ErrorContext, ResourceNotFoundError
from weaponpaints.core.repository_protocols import WeaponRepository
from weaponpaints.core.validation import validate_weapon_config, validate_weapon_key
from weaponpaints.core.weapon_config import WeaponConfig

logger = logging.getLogger(__name__)


class WeaponLoadoutService:
    """Per-request orchestration around a WeaponRepository."""

    def __init__(self, repository: WeaponRepository):
        self.repository = repository

    async def list_weapons(self, steamid: SteamId) -> list[WeaponConfig]:
        return await self.repository.fetch_all(steamid)

    async def save_weapon(self, config: WeaponConfig) -> WeaponConfig:
        """Create or wholesale-replace the configuration at config.key."""
        validate_weapon_config(config)
        stored = config.normalized()
        await self.repository.upsert(stored)
        return stored

    async def delete_weapon(
        self, steamid: SteamId, team: int, defindex: int,
    ) -> None:
        validate_weapon_key(team, defindex)
        affected = await self.repository.delete(steamid, team, defindex)
        if affected == 0:
            raise ResourceNotFoundError(
                "Weapon configuration",
                ErrorContext(
                    steamid=steamid, weapon_team=team, weapon_defindex=defindex,
                ),
            )
        logger.info(
            "Weapon configuration deleted",
            extra={
                "steamid": steamid,
                "weapon_team": team,
                "weapon_defindex": defindex,
            },
        )
