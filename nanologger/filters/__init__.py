"""
Log filters module

Provides the module path filter used by the logger.
"""

from nanologger.filters.module_filter import ModuleFilter, matches_module_filter

__all__ = [
    "ModuleFilter",
    "matches_module_filter",
]
