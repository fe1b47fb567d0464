"""
pairing.
=======

Does: Namespace grouping and foreground/background pairing of ColorTokens.
"""

from .pairer import ColorPair, PairingCollision, Side, group_by_namespace, group_by_pair

__all__ = [
    "ColorPair",
    "PairingCollision",
    "Side",
    "group_by_namespace",
    "group_by_pair",
]

__docformat__ = "google"
