"""Weapon Paints API — persistence service for CS2 weapon cosmetic loadouts.

Invariants:
    - Package root contains no executable code beyond the version constant
      (import side-effects prohibited)
"""

__version__ = "1.0.0"
