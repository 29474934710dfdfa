"""Routes package initialization."""

from . import (
    alumni_attending,
    networking,
    events,
    alumni,
    news,
    health
)

__all__ = [
    'alumni_attending',
    'networking',
    'events',
    'alumni',
    'news',
    'health'
]
