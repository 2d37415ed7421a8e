"""Request Dependencies — owner identity and per-request service wiring.

Invariants:
    - Authentication happens upstream; the gateway forwards the authenticated
      SteamID in the configured owner header
    - A caller may only act on the steam_id in the path that equals their own
    - Handlers receive a trusted SteamId, never the raw header

Design Decisions:
    - Ownership check as a FastAPI dependency: every weapon route declares it,
      so a route cannot forget it
"""

from fastapi import Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from weaponpaints.config import get_settings
from weaponpaints.core.domain_types import SteamId
from weaponpaints.core.errors import ErrorContext, ForbiddenError, UnauthorizedError
from weaponpaints.infrastructure.database import get_db
from weaponpaints.services.weapon_loadout import WeaponLoadoutService
from weaponpaints.services.weapon_repository import SqlWeaponRepository


async def require_own_resource(
    request: Request,
    steam_id: str = Path(min_length=1, max_length=64),
) -> SteamId:
    """Resolve the owner identity; reject callers acting on someone else's loadout."""
    caller = request.headers.get(get_settings().owner_header)
    if not caller:
        raise UnauthorizedError()
    if caller != steam_id:
        raise ForbiddenError(ErrorContext(steamid=caller))
    return SteamId(steam_id)


async def get_weapon_service(
    db: AsyncSession = Depends(get_db),
) -> WeaponLoadoutService:
    return WeaponLoadoutService(SqlWeaponRepository(db))
