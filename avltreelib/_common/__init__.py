"""Common components shared across AVLTreeLib.

This internal package contains the configuration classes used by both
the tree types and the planning layer. It should NOT be imported directly
by users; use ``avltreelib.config`` instead.

Important: This package must NEVER import from the tree modules to avoid
circular dependencies.
"""

# Re-export configuration components
from .config import (
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
