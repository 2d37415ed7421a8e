"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure validation and
      serialization functions that surround these calls are never async
"""

from typing import Protocol

from weaponpaints.core.domain_types import SteamId
from weaponpaints.core.weapon_config import WeaponConfig


class WeaponRepository(Protocol):
    """Contract for weapon configuration persistence — implemented by shell."""
    async def fetch_all(self, steamid: SteamId) -> list[WeaponConfig]: ...
    async def upsert(self, config: WeaponConfig) -> None: ...
    async def delete(self, steamid: SteamId, team: int, defindex: int) -> int: ...
