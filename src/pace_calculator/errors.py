"""Errors raised while reading distance, time and pace tokens."""


class PaceInputError(ValueError):
    """Base class for input the calculator cannot interpret."""

    def __init__(self, token: str, message: str):
        super().__init__(message)
        self.token = token
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidUnitError(PaceInputError):
    """The trailing unit letter of a distance or pace is not 'k' or 'm'."""

    def __init__(self, token: str, kind: str = "distance"):
        self.unit = token[-1:] if token else ""
        self.kind = kind
        super().__init__(token, f"Invalid {kind} unit '{self.unit}'. Must be 'k' or 'm'")


class TimeFormatError(PaceInputError):
    """A colon-form time does not have exactly two parts."""

    def __init__(self, token: str):
        super().__init__(token, f"{token} invalid format, expected e.g. '7:30'")


class InvalidNumberError(PaceInputError):
    """A segment that should hold a number does not."""

    def __init__(self, token: str, segment: str, expected: str):
        self.segment = segment
        self.expected = expected
        super().__init__(token, f"Invalid number '{segment}' in '{token}': expected {expected}")
