"""Move, Jump and JumpChain value objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from checkie.core.types import Square, square_alias


def _alias(sq: Square) -> str:
    return square_alias(*sq)


@dataclass(frozen=True, slots=True)
class Move:
    """A non-capturing step (man) or slide (king)."""

    start: Square
    end: Square

    def __str__(self) -> str:
        return f"{_alias(self.start)}-{_alias(self.end)}"


@dataclass(frozen=True, slots=True)
class Jump:
    """A single capture hop over exactly one enemy piece."""

    start: Square
    over: Square
    end: Square

    def __str__(self) -> str:
        return f"{_alias(self.start)}x{_alias(self.end)}"


@dataclass(frozen=True, slots=True)
class JumpChain:
    """One complete capture turn: jumps linked end-to-start."""

    jumps: tuple[Jump, ...]

    def __post_init__(self) -> None:
        if not self.jumps:
            raise ValueError("A jump chain needs at least one jump")
        for prev, nxt in zip(self.jumps, self.jumps[1:]):
            if prev.end != nxt.start:
                raise ValueError(f"Broken jump chain: {prev} then {nxt}")

    @property
    def start(self) -> Square:
        return self.jumps[0].start

    @property
    def end(self) -> Square:
        return self.jumps[-1].end

    @property
    def captured(self) -> tuple[Square, ...]:
        """Squares of the jumped-over pieces, in capture order."""
        return tuple(j.over for j in self.jumps)

    def __len__(self) -> int:
        return len(self.jumps)

    def __iter__(self) -> Iterator[Jump]:
        return iter(self.jumps)

    def __str__(self) -> str:
        return _alias(self.start) + "".join(f"x{_alias(j.end)}" for j in self.jumps)
