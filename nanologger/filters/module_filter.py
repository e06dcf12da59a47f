"""
Module path filter

Scopes log output to calling modules using allow/deny prefix lists
"""

from typing import Iterable, Sequence


def matches_module_filter(
    module_path: str,
    allow: Sequence[str],
    deny: Sequence[str],
) -> bool:
    """
    Check a module path against allow and deny prefixes.

    Matching is plain string-prefix matching, so "ab" matches the prefix "a".
    An empty allow list admits every path. Deny is only consulted once allow
    has passed, which makes deny win when both match.

    Args:
        module_path: Path of the calling module, e.g. "svc.db.query"
        allow: Prefixes that are allowed (empty = all)
        deny: Prefixes that are rejected

    Returns:
        True if the path may log

    Example:
        >>> matches_module_filter("svc.db.pool", ["svc.db"], ["svc.db.pool"])
        False
    """
    if allow and not any(module_path.startswith(prefix) for prefix in allow):
        return False
    return not any(module_path.startswith(prefix) for prefix in deny)


class ModuleFilter:
    """
    Allow/deny prefix lists checked against the module path of each call.
    """

    def __init__(self, allow: Iterable[str] = (), deny: Iterable[str] = ()):
        """
        Initialize module filter.

        Args:
            allow: Allowed module path prefixes. Empty allows everything.
            deny: Denied module path prefixes, checked after allow.

        Example:
            # Only the database layer, minus its noisy connection pool
            filter = ModuleFilter(allow=["svc.db"], deny=["svc.db.pool"])
        """
        self.allow = tuple(allow)
        self.deny = tuple(deny)

    def matches(self, module_path: str) -> bool:
        """True if the module path may log."""
        return matches_module_filter(module_path, self.allow, self.deny)

    def __call__(self, module_path: str) -> bool:
        return self.matches(module_path)

    def __repr__(self) -> str:
        """String representation."""
        return f"ModuleFilter(allow={list(self.allow)}, deny={list(self.deny)})"
