"""Variable interning for expression trees."""

from .variable_registry import (
    VariableRegistry, get_global_registry, clear_global_registry, resolve_registry
)

__all__ = ['VariableRegistry', 'get_global_registry', 'clear_global_registry', 'resolve_registry']
