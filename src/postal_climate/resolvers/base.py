"""
postal_climate.resolvers.base

Capability interface shared by the concrete resolvers.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

InT = TypeVar("InT", contravariant=True)
OutT = TypeVar("OutT", covariant=True)


class Resolver(Protocol[InT, OutT]):
    async def resolve(self, value: InT) -> OutT: ...
