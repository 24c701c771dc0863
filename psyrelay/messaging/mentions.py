"""Mention handling over Telegram entity ranges."""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import BoundsError
from .models import Entity

_UNIT = 2  # bytes per UTF-16 code unit


def _units(text: str) -> bytes:
    return text.encode("utf-16-le")


def _check_bounds(entity: Entity, size: int) -> None:
    if entity.offset < 0 or entity.length < 0 or entity.offset + entity.length > size:
        raise BoundsError(
            f"{entity.type} entity [{entity.offset}, {entity.offset + entity.length}) "
            f"outside text of length {size}"
        )


def entity_text(text: str, entity: Entity) -> str:
    """Return the slice of *text* covered by *entity*."""
    raw = _units(text)
    _check_bounds(entity, len(raw) // _UNIT)
    start = entity.offset * _UNIT
    return raw[start:start + entity.length * _UNIT].decode("utf-16-le")


def delete_mention(text: str, entities: Iterable[Entity]) -> str:
    """Cut the first ``mention`` entity out of *text*.

    Later mentions are kept.  Raises :class:`BoundsError` when the entity
    range does not fit the text.
    """
    for entity in entities:
        if entity.type != "mention":
            continue
        raw = _units(text)
        _check_bounds(entity, len(raw) // _UNIT)
        start = entity.offset * _UNIT
        end = start + entity.length * _UNIT
        return (raw[:start] + raw[end:]).decode("utf-16-le")
    return text


def mentions_bot(text: str, entities: Iterable[Entity], username: str) -> bool:
    """True when some ``mention`` entity names *username* (case-insensitive)."""
    if not username:
        return False
    wanted = username.lstrip("@").lower()
    for entity in entities:
        if entity.type != "mention":
            continue
        if entity.user is not None and (entity.user.username or "").lower() == wanted:
            return True
        if entity_text(text, entity).lstrip("@").lower() == wanted:
            return True
    return False
