"""Services Layer — orchestration and persistence for weapon loadouts.

Invariants:
    - Services receive an AsyncSession or a repository, never a Request
    - Repositories are the only place SQL is built

Design Decisions:
    - Service and repository split: the service depends on a Protocol from core/,
      the repository implements it with SQLAlchemy
"""
