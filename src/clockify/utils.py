"""Shared helpers for the Clockify client."""

from __future__ import annotations

from typing import Hashable, Iterable, TypeVar

H = TypeVar("H", bound=Hashable)


def unique_in_order(values: Iterable[H]) -> list[H]:
    """Return unique values preserving the original order."""
    seen: set[H] = set()
    output: list[H] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        output.append(value)
    return output
