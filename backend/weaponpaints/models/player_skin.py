"""PlayerSkin ORM — one stored weapon configuration per (steamid, team, defindex).

Invariants:
    - Composite primary key (steamid, weapon_team, weapon_defindex): at most one
      row per weapon per team per player, which the upsert relies on
    - Exactly 5 sticker columns; each holds one encoded sticker or the empty-slot string
    - weapon_keychain is NULL when no keychain is attached

Design Decisions:
    - Fixed sticker columns over a child table: the game server plugin reads this
      table directly (ADR: shared schema with the in-game plugin)
    - Column names match the plugin's schema verbatim (weapon_ prefix)
"""

from sqlalchemy import String, Integer, Float, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from weaponpaints.core.serialization import EMPTY_STICKER_SLOT
from weaponpaints.db.base import Base


class PlayerSkin(Base):
    """Stored weapon configuration row."""
    __tablename__ = "wp_player_skins"

    steamid: Mapped[str] = mapped_column(String(64), primary_key=True)
    weapon_team: Mapped[int] = mapped_column(Integer, primary_key=True)
    weapon_defindex: Mapped[int] = mapped_column(Integer, primary_key=True)
    weapon_paint_id: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    weapon_wear: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.000001,
    )
    weapon_seed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    weapon_nametag: Mapped[str | None] = mapped_column(
        String(128), nullable=True,
    )
    weapon_stattrak: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    weapon_stattrak_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    weapon_sticker_0: Mapped[str] = mapped_column(
        String(255), nullable=False, default=EMPTY_STICKER_SLOT,
    )
    weapon_sticker_1: Mapped[str] = mapped_column(
        String(255), nullable=False, default=EMPTY_STICKER_SLOT,
    )
    weapon_sticker_2: Mapped[str] = mapped_column(
        String(255), nullable=False, default=EMPTY_STICKER_SLOT,
    )
    weapon_sticker_3: Mapped[str] = mapped_column(
        String(255), nullable=False, default=EMPTY_STICKER_SLOT,
    )
    weapon_sticker_4: Mapped[str] = mapped_column(
        String(255), nullable=False, default=EMPTY_STICKER_SLOT,
    )
    weapon_keychain: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )

    @property
    def sticker_slots(self) -> list[str]:
        return [
            self.weapon_sticker_0,
            self.weapon_sticker_1,
            self.weapon_sticker_2,
            self.weapon_sticker_3,
            self.weapon_sticker_4,
        ]
