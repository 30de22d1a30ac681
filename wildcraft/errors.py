"""Exceptions for programming and content errors.

Gameplay failures (not enough energy, missing ingredients, ...) are not
exceptions; they come back as an Outcome on the TransitionResult.
"""

from __future__ import annotations


class WildcraftError(Exception):
    """Base class for all wildcraft exceptions."""


class UnknownContentError(WildcraftError, KeyError):
    """An id was passed that the catalog does not define."""

    def __init__(self, kind: str, content_id: str):
        self.kind = kind
        self.content_id = content_id
        super().__init__(f"Unknown {kind} '{content_id}'")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class CatalogError(WildcraftError):
    """Content tables are inconsistent."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid catalog: " + "; ".join(problems))
