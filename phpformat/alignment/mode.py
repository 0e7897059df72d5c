"""Alignment modes for wrappable constructs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Self

# Legacy bit layout of the packed alignment integer.
M_FORCE = 1
M_INDENT_ON_COLUMN = 2
M_INDENT_BY_ONE = 4
M_COMPACT_SPLIT = 16
M_COMPACT_FIRST_BREAK_SPLIT = 32
M_ONE_PER_LINE_SPLIT = 32 + 16
M_NEXT_SHIFTED_SPLIT = 64
M_NEXT_PER_LINE_SPLIT = 64 + 16
M_NO_ALIGNMENT = 0

SPLIT_MASK = M_COMPACT_SPLIT | M_COMPACT_FIRST_BREAK_SPLIT | M_NEXT_SHIFTED_SPLIT
MODIFIER_MASK = M_FORCE | M_INDENT_ON_COLUMN | M_INDENT_BY_ONE


class SplitStrategy(Enum):
    """How a fragment is broken across lines."""

    NO_ALIGNMENT = M_NO_ALIGNMENT
    COMPACT_SPLIT = M_COMPACT_SPLIT
    COMPACT_FIRST_BREAK_SPLIT = M_COMPACT_FIRST_BREAK_SPLIT
    ONE_PER_LINE_SPLIT = M_ONE_PER_LINE_SPLIT
    NEXT_SHIFTED_SPLIT = M_NEXT_SHIFTED_SPLIT
    NEXT_PER_LINE_SPLIT = M_NEXT_PER_LINE_SPLIT


@dataclass(frozen=True, slots=True)
class AlignmentMode:
    """A split strategy plus its independent indentation modifiers."""

    strategy: SplitStrategy = SplitStrategy.NO_ALIGNMENT
    indent_by_one: bool = False
    indent_on_column: bool = False
    force_split: bool = False

    def with_strategy(self, strategy: SplitStrategy) -> Self:
        """Return a copy using another strategy, keeping the modifiers."""
        return replace(self, strategy=strategy)

    def with_modifiers(
        self,
        *,
        indent_by_one: bool | None = None,
        indent_on_column: bool | None = None,
        force_split: bool | None = None,
    ) -> Self:
        """Return a copy with some modifiers changed, keeping the strategy."""
        return replace(
            self,
            indent_by_one=self.indent_by_one if indent_by_one is None else indent_by_one,
            indent_on_column=(
                self.indent_on_column if indent_on_column is None else indent_on_column
            ),
            force_split=self.force_split if force_split is None else force_split,
        )

    @property
    def splits(self) -> bool:
        return self.strategy is not SplitStrategy.NO_ALIGNMENT

    def pack(self) -> int:
        """Encode into the legacy integer bit-mask."""
        value = self.strategy.value
        if self.force_split:
            value |= M_FORCE
        if self.indent_on_column:
            value |= M_INDENT_ON_COLUMN
        if self.indent_by_one:
            value |= M_INDENT_BY_ONE
        return value

    @classmethod
    def unpack(cls, value: int) -> AlignmentMode:
        """Decode a packed bit-mask.

        Raises ValueError for bits outside the known layout, so a corrupted
        value can never collapse into an unrelated strategy.
        """
        if value < 0 or value & ~(SPLIT_MASK | MODIFIER_MASK):
            msg = f"Unknown alignment bits in {value}"
            raise ValueError(msg)
        strategy = SplitStrategy(value & SPLIT_MASK)
        return cls(
            strategy,
            indent_by_one=bool(value & M_INDENT_BY_ONE),
            indent_on_column=bool(value & M_INDENT_ON_COLUMN),
            force_split=bool(value & M_FORCE),
        )

    def __str__(self) -> str:
        flags = [
            name
            for name, enabled in (
                ("INDENT_BY_ONE", self.indent_by_one),
                ("INDENT_ON_COLUMN", self.indent_on_column),
                ("FORCE_SPLIT", self.force_split),
            )
            if enabled
        ]
        return "+".join([self.strategy.name, *flags])


NO_ALIGNMENT = AlignmentMode(SplitStrategy.NO_ALIGNMENT)
COMPACT = AlignmentMode(SplitStrategy.COMPACT_SPLIT)
COMPACT_FIRST_BREAK = AlignmentMode(SplitStrategy.COMPACT_FIRST_BREAK_SPLIT)
ONE_PER_LINE = AlignmentMode(SplitStrategy.ONE_PER_LINE_SPLIT)
NEXT_PER_LINE = AlignmentMode(SplitStrategy.NEXT_PER_LINE_SPLIT)
NEXT_SHIFTED = AlignmentMode(SplitStrategy.NEXT_SHIFTED_SPLIT)
