"""Formatter option registry."""

from phpformat.options.constants import (
    DO_NOT_INSERT,
    FALSE,
    INSERT,
    KEY_PREFIX,
    TRUE,
    BracePosition,
    LineSeparator,
    TabChar,
)
from phpformat.options.descriptors import OptionDescriptor
from phpformat.options.presets import StylePresets
from phpformat.options.registry import (
    OPTION_DESCRIPTORS,
    OptionError,
    OptionSet,
    option_groups,
    option_names,
)

__all__ = [
    "DO_NOT_INSERT",
    "FALSE",
    "INSERT",
    "KEY_PREFIX",
    "OPTION_DESCRIPTORS",
    "TRUE",
    "BracePosition",
    "LineSeparator",
    "OptionDescriptor",
    "OptionError",
    "OptionSet",
    "StylePresets",
    "TabChar",
    "option_groups",
    "option_names",
]
