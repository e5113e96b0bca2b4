"""
Categories package - Canonical category codes and their multilingual aliases.
"""

from .keywords import CATEGORY_DEFINITIONS, CategoryDefinition
from .registry import (
    CategoryAliasRegistry,
    CategoryRegistryBuilder,
    build_registry,
    get_category_registry,
)

__all__ = [
    'CATEGORY_DEFINITIONS',
    'CategoryDefinition',
    'CategoryAliasRegistry',
    'CategoryRegistryBuilder',
    'build_registry',
    'get_category_registry',
]
