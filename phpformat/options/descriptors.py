"""Typed option descriptors and their wire codecs."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from phpformat.alignment.mode import AlignmentMode
from phpformat.options.constants import DO_NOT_INSERT, FALSE, INSERT, KEY_PREFIX, TRUE

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class OptionCodec(ABC):
    """Converts an option value to and from its wire string."""

    kind: str = ""

    @abstractmethod
    def decode(self, raw: Any) -> Any:
        """Decode a wire value, raising ValueError or TypeError when malformed."""

    @abstractmethod
    def encode(self, value: Any) -> str:
        """Encode a native value."""

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Check that a native value is valid for this codec."""

    def describe(self) -> str:
        return self.kind


class InsertCodec(OptionCodec):
    """Whitespace/new-line toggle stored as an insert or do-not-insert sentinel."""

    kind = "insert"

    def decode(self, raw: Any) -> bool:
        if raw == INSERT:
            return True
        if raw == DO_NOT_INSERT:
            return False
        msg = f"Expected {INSERT!r} or {DO_NOT_INSERT!r}, got {raw!r}"
        raise ValueError(msg)

    def encode(self, value: bool) -> str:
        return INSERT if value else DO_NOT_INSERT

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


class BooleanCodec(OptionCodec):
    """Plain boolean stored as ``true``/``false``."""

    kind = "boolean"

    def decode(self, raw: Any) -> bool:
        if raw == TRUE:
            return True
        if raw == FALSE:
            return False
        msg = f"Expected {TRUE!r} or {FALSE!r}, got {raw!r}"
        raise ValueError(msg)

    def encode(self, value: bool) -> str:
        return TRUE if value else FALSE

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


class IntegerCodec(OptionCodec):
    """Bounded integer stored as a decimal string."""

    kind = "integer"

    def __init__(self, minimum: int = 0, maximum: int | None = None) -> None:
        self.minimum = minimum
        self.maximum = maximum

    def decode(self, raw: Any) -> int:
        if not isinstance(raw, str):
            msg = f"Expected a decimal string, got {type(raw).__name__}"
            raise TypeError(msg)
        if not _DECIMAL.fullmatch(raw):
            msg = f"Not a decimal integer: {raw!r}"
            raise ValueError(msg)
        value = int(raw)
        if not self.accepts(value):
            msg = f"{value} is outside {self.describe()}"
            raise ValueError(msg)
        return value

    def encode(self, value: int) -> str:
        return str(value)

    def accepts(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if value < self.minimum:
            return False
        return self.maximum is None or value <= self.maximum

    def describe(self) -> str:
        upper = "" if self.maximum is None else str(self.maximum)
        return f"integer [{self.minimum}..{upper}]"


class ChoiceCodec(OptionCodec):
    """Enumerated setting stored as one of a fixed set of literals."""

    kind = "choice"

    def __init__(self, choices: type[Enum]) -> None:
        self.choices = choices

    def decode(self, raw: Any) -> Enum:
        if not isinstance(raw, str):
            msg = f"Expected a string literal, got {type(raw).__name__}"
            raise TypeError(msg)
        return self.choices(raw)

    def encode(self, value: Enum) -> str:
        return value.value

    def accepts(self, value: Any) -> bool:
        return isinstance(value, self.choices)

    def describe(self) -> str:
        return " | ".join(repr(choice.value) for choice in self.choices)


class AlignmentCodec(OptionCodec):
    """Alignment mode stored as the decimal string of its packed bit-mask."""

    kind = "alignment"

    def decode(self, raw: Any) -> AlignmentMode:
        if not isinstance(raw, str):
            msg = f"Expected a decimal string, got {type(raw).__name__}"
            raise TypeError(msg)
        if not _DECIMAL.fullmatch(raw):
            msg = f"Not a packed alignment value: {raw!r}"
            raise ValueError(msg)
        return AlignmentMode.unpack(int(raw))

    def encode(self, value: AlignmentMode) -> str:
        return str(value.pack())

    def accepts(self, value: Any) -> bool:
        return isinstance(value, AlignmentMode)


@dataclass(frozen=True, slots=True)
class OptionDescriptor:
    """One entry of the option table: name, wire codec, default and UI group."""

    name: str
    codec: OptionCodec
    default: Any
    group: str

    @property
    def key(self) -> str:
        return KEY_PREFIX + self.name

    def decode(self, raw: Any) -> Any:
        """Decode ``raw`` or fall back to this option's own default."""
        try:
            return self.codec.decode(raw)
        except (TypeError, ValueError) as e:
            logger.debug("Option %s: %s; using default %r", self.key, e, self.default)
            return self.default

    def encode(self, value: Any) -> str:
        return self.codec.encode(value)
