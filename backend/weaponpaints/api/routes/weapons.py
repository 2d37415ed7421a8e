"""Weapon Routes — read, upsert, and delete a player's weapon configurations.

Invariants:
    - Every route resolves the owner through require_own_resource first
    - Path team/defindex are integers (FastAPI) and then range-checked (core)
    - PUT replaces the whole configuration; omitted fields take their defaults
    - Routes never contain business logic (delegate to WeaponLoadoutService)

Design Decisions:
    - Errors are raised, not returned: api/error_handlers.py shapes every
      400/404/500 body, so handlers only build success responses
"""

import logging

from fastapi import APIRouter, Depends

from weaponpaints.api.dependencies import get_weapon_service, require_own_resource
from weaponpaints.core.domain_types import SteamId
from weaponpaints.schemas.weapon import (
    WeaponUpdate, WeaponResponse, WeaponListResponse, WeaponSavedResponse,
    MessageResponse,
)
from weaponpaints.services.weapon_loadout import WeaponLoadoutService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/players/{steam_id}/weapons", tags=["weapons"],
)


@router.get("", response_model=WeaponListResponse)
async def list_weapons(
    steamid: SteamId = Depends(require_own_resource),
    service: WeaponLoadoutService = Depends(get_weapon_service),
):
    """All weapon configurations of the player (possibly none)."""
    configs = await service.list_weapons(steamid)
    return WeaponListResponse(
        weapons=[WeaponResponse.from_config(c) for c in configs],
    )


@router.put("/{team}/{defindex}", response_model=WeaponSavedResponse)
async def save_weapon(
    team: int,
    defindex: int,
    body: WeaponUpdate,
    steamid: SteamId = Depends(require_own_resource),
    service: WeaponLoadoutService = Depends(get_weapon_service),
):
    """Create or replace the configuration for one weapon of one team."""
    saved = await service.save_weapon(body.to_config(steamid, team, defindex))
    return WeaponSavedResponse(
        message="Weapon configuration saved successfully",
        weapon=WeaponResponse.from_config(saved),
    )


@router.delete("/{team}/{defindex}", response_model=MessageResponse)
async def delete_weapon(
    team: int,
    defindex: int,
    steamid: SteamId = Depends(require_own_resource),
    service: WeaponLoadoutService = Depends(get_weapon_service),
):
    """Remove the configuration; 404 when nothing was stored for the key."""
    await service.delete_weapon(steamid, team, defindex)
    return MessageResponse(message="Weapon configuration deleted successfully")
