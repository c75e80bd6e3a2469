"""Types and validation helpers for tags resource.

Tag inputs are simple primitives (workspace_id, name); validation stays
inline in tags.py.
"""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class TagResponse(TypedDict, total=False):
    """Readonly tag dict returned by tag endpoints."""
    id: ReadOnly[str]
    name: ReadOnly[str]
    workspaceId: ReadOnly[str]
    archived: ReadOnly[bool]


def _decode_tag(raw: object) -> TagResponse:
    if not isinstance(raw, dict) or not isinstance(raw.get("id"), str):
        raise ValueError(f"Tag must be a dict with an id. Given [{raw!r}]")
    return TagResponse(
        id=raw["id"],
        name=raw.get("name", ""),
        workspaceId=raw.get("workspaceId", ""),
        archived=bool(raw.get("archived", False)),
    )


def _decode_tags(raw: object) -> list[TagResponse]:
    if not isinstance(raw, list):
        raise TypeError(f"Tag list must be a list. Given [{type(raw)}]")
    return [_decode_tag(item) for item in raw]


__all__ = ["TagResponse"]
