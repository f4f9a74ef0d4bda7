"""Request lifecycle states rendered by the presentation layer.

Exactly one of these describes an aggregator at any time, so a result and an
error can never be shown together.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .entities import Conditions


# Failure reasons, shared with ProviderError.reason
NOT_FOUND = "not_found"
UPSTREAM = "upstream"
ERROR = "error"

FAILURE_REASONS = frozenset({NOT_FOUND, UPSTREAM, ERROR})


@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
    status: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Success:
    conditions: Conditions

    status: ClassVar[str] = "success"


@dataclass(frozen=True)
class Failure:
    message: str
    reason: str = UPSTREAM

    status: ClassVar[str] = "error"


RequestState = Union[Idle, Loading, Success, Failure]


__all__ = [
    "ERROR",
    "FAILURE_REASONS",
    "NOT_FOUND",
    "UPSTREAM",
    "Failure",
    "Idle",
    "Loading",
    "RequestState",
    "Success",
]
