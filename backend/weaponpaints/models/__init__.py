"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)
    - wp_player_skins is keyed by player identity, never by a surrogate id

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before create_all
      or an alembic autogenerate runs
"""

from weaponpaints.models.player_skin import PlayerSkin  # noqa: F401
