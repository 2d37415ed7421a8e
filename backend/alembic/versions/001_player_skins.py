"""Player skins table — one row per (steamid, team, weapon defindex).

Revision ID: 001_player_skins
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_player_skins"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_EMPTY_STICKER_SLOT = "0;0;0;0;0;0;0"


def _sticker_column(slot: int) -> sa.Column:
    return sa.Column(
        f"weapon_sticker_{slot}", sa.String(255),
        nullable=False, server_default=_EMPTY_STICKER_SLOT,
    )


def upgrade() -> None:
    op.create_table(
        "wp_player_skins",
        sa.Column("steamid", sa.String(64), nullable=False),
        sa.Column("weapon_team", sa.Integer, nullable=False),
        sa.Column("weapon_defindex", sa.Integer, nullable=False),
        sa.Column("weapon_paint_id", sa.Integer, nullable=False, server_default="0"),
        sa.Column("weapon_wear", sa.Float, nullable=False, server_default="0.000001"),
        sa.Column("weapon_seed", sa.Integer, nullable=False, server_default="0"),
        sa.Column("weapon_nametag", sa.String(128), nullable=True),
        sa.Column("weapon_stattrak", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("weapon_stattrak_count", sa.Integer, nullable=False, server_default="0"),
        *[_sticker_column(slot) for slot in range(5)],
        sa.Column("weapon_keychain", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint(
            "steamid", "weapon_team", "weapon_defindex",
            name="pk_wp_player_skins",
        ),
    )


def downgrade() -> None:
    op.drop_table("wp_player_skins")
