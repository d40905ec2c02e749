"""Lookup table of supported chains."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChainEntry:
    """A chain and the index it is registered under."""

    index: int
    chain: str


@dataclass
class ChainControl:
    """An ordered list of supported chains."""

    chains: list[ChainEntry] = field(default_factory=list)

    def chain_from_index(self, index: int) -> str | None:
        """Return the name of the first chain with ``index``, or None."""
        return next((e.chain for e in self.chains if e.index == index), None)

    def index_from_chain(self, chain: str) -> int | None:
        """Return the index of the first entry named ``chain``, or None."""
        return next((e.index for e in self.chains if e.chain == chain), None)

    def vector_index(self, chain_index: int) -> int | None:
        """Return the list position of the first entry with ``chain_index``, or None."""
        return next(
            (pos for pos, e in enumerate(self.chains) if e.index == chain_index),
            None,
        )