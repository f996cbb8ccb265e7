"""
Global configuration for symbolic_taylor.

A single process-wide SymbolicConfig instance, managed the same way as the
global logger in logging_system.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional


@dataclass(frozen=True)
class SymbolicConfig:
    """Process-wide switches.

    intern_nodes: build nodes through the hash-consing pool so structurally
        identical subtrees share one object.
    negate_zero_minuend: when True, ``0 - b`` builds ``-1 * b``. The default
        keeps the historical rule ``0 - b = b``.
    """
    intern_nodes: bool = True
    negate_zero_minuend: bool = False


_global_config: Optional[SymbolicConfig] = None


def get_config() -> SymbolicConfig:
    """Get or create the global config instance"""
    global _global_config
    if _global_config is None:
        _global_config = SymbolicConfig()
    return _global_config


def configure(**kwargs) -> SymbolicConfig:
    """Update the global config; unknown keys raise TypeError.

    Any change clears the node pool, since interned nodes were built under
    the previous rules.
    """
    global _global_config
    known = {f.name for f in fields(SymbolicConfig)}
    unknown = set(kwargs) - known
    if unknown:
        raise TypeError(f"Unknown config option(s): {', '.join(sorted(unknown))}")

    _global_config = replace(get_config(), **kwargs)

    from .expression_tree.optimization.memory_pool import clear_global_pool
    clear_global_pool()
    return _global_config


def reset_config() -> SymbolicConfig:
    """Restore defaults"""
    global _global_config
    _global_config = None
    from .expression_tree.optimization.memory_pool import clear_global_pool
    clear_global_pool()
    return get_config()
