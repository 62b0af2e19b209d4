"""Domain models for recommendations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Recommendation:
    """Advisory message emitted by a recommendation rule."""

    title: str
    body: str
