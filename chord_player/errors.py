"""Errors raised while building or resolving a chord."""


class ChordError(ValueError):
    """Base class for chord specification and resolution errors."""


class MissingSpecError(ChordError):
    """No chord name or note list was given."""


class ParseError(ChordError):
    """A chord name or note token does not match the expected pattern."""


class UnknownRootError(ChordError):
    """The normalized root is not one of the twelve canonical pitch classes."""


class UnknownQualityError(ChordError):
    """The chord quality is absent from the interval table."""


class UnknownCompletionModeError(ChordError):
    """The completion mode is not one of ``CompletionMode``."""
