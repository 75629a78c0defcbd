class ConversionError(ValueError):
    """Base class for errors raised while converting an automaton."""


class MalformedAutomaton(ConversionError):
    """The automaton references states that do not exist, or is badly shaped."""


class InvalidRegex(ConversionError):
    """A regular expression could not be parsed."""
