"""Configuration re-export.

Users import configuration from here; the definitions live in the
internal _common package.
"""

from ._common.config import (
    TreeConfig,
    TraversalStrategy,
    BalancingStrategy,
    InsertMethod,
)

__all__ = [
    'TreeConfig',
    'TraversalStrategy',
    'BalancingStrategy',
    'InsertMethod',
]
