"""Reading ``KEY=value`` environment entries."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping


def parse_environment(entries: Iterable[str]) -> Dict[str, str]:
    """Build an ordered mapping from ``KEY=value`` strings.

    Each entry is split at its first ``=``; entries without one are ignored.
    When a key appears more than once, its first value is kept.
    """
    environment: Dict[str, str] = {}
    for entry in entries:
        key, sign, value = entry.partition("=")
        if sign:
            environment.setdefault(key, value)
    return environment


def describe_environment(environment: Mapping[str, str]) -> str:
    """Render each variable as a ``key:`` line followed by a ``value:`` line."""
    return "".join(
        f"key:{key} \nvalue:{value}\n" for key, value in environment.items()
    )