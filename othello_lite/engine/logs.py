from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .board import Cell, Coord
from .errors import LogOverflowError, LogUnderflowError

# Worst-case bounds for a full game with search on top of it. Every applied
# move fills one of the 60 starting empties.
MAX_BLOCKS = 60
MOVE_LOG_CAPACITY = 1830
FLIP_LOG_CAPACITY = 1520


@dataclass
class MoveLog:
    """Candidate moves gathered per enumeration, popped a block at a time."""

    coords: List[Coord] = field(default_factory=list)
    blocks: List[int] = field(default_factory=list)
    capacity: int = MOVE_LOG_CAPACITY

    def push_block(self, found: Sequence[Coord]) -> None:
        if len(self.blocks) >= MAX_BLOCKS:
            raise LogOverflowError(f"move log exceeds {MAX_BLOCKS} blocks")
        if len(self.coords) + len(found) > self.capacity:
            raise LogOverflowError(f"move log exceeds {self.capacity} entries")
        self.coords.extend(found)
        self.blocks.append(len(found))

    def pop_block(self) -> None:
        if not self.blocks:
            raise LogUnderflowError("discard without a matching enumeration")
        n = self.blocks.pop()
        if n:
            del self.coords[-n:]

    def clear(self) -> None:
        self.coords.clear()
        self.blocks.clear()

    def __len__(self) -> int:
        return len(self.coords)


@dataclass
class FlipBlock:
    length: int
    who: Cell


@dataclass
class FlipLog:
    """Changes made by applied moves.

    The first entry of each block is the placed disc, the rest are the
    opponent discs it flipped.
    """

    coords: List[Coord] = field(default_factory=list)
    blocks: List[FlipBlock] = field(default_factory=list)
    capacity: int = FLIP_LOG_CAPACITY

    def push_block(self, changed: Sequence[Coord], who: Cell) -> None:
        if len(self.blocks) >= MAX_BLOCKS:
            raise LogOverflowError(f"flip log exceeds {MAX_BLOCKS} blocks")
        if len(self.coords) + len(changed) > self.capacity:
            raise LogOverflowError(f"flip log exceeds {self.capacity} entries")
        self.coords.extend(changed)
        self.blocks.append(FlipBlock(len(changed), who))

    def pop_block(self) -> Tuple[Cell, List[Coord]]:
        if not self.blocks:
            raise LogUnderflowError("undo without a matching move")
        block = self.blocks.pop()
        start = len(self.coords) - block.length
        changed = self.coords[start:]
        del self.coords[start:]
        return block.who, changed

    def clear(self) -> None:
        self.coords.clear()
        self.blocks.clear()

    def __len__(self) -> int:
        return len(self.coords)
