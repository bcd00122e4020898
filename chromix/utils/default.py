from __future__ import annotations
from typing import Optional, TypeVar
from ..types.channel_types import DEFAULT_CHANNEL

T = TypeVar('T')


def channel_or_default(value: Optional[T]) -> T | int:
    """Return the channel value if given; an omitted (None) channel is 255."""
    return DEFAULT_CHANNEL if value is None else value
