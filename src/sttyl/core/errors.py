"""Failures that end an sttyl invocation."""

from __future__ import annotations


class SttylError(Exception):
    """Base class; every instance is fatal and maps to exit status 1."""

    def diagnostic(self, program: str) -> str:
        return f"{program}: {self}"


class ArgumentError(SttylError):
    kind = "bad argument"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{self.kind} '{token}'")


class MissingArgumentError(ArgumentError):
    kind = "missing argument to"


class InvalidArgumentError(ArgumentError):
    kind = "invalid integer argument"


class IllegalArgumentError(ArgumentError):
    kind = "illegal argument"


class TerminalError(SttylError):
    pass


class TerminalQueryError(TerminalError):
    pass


class TerminalCommitError(TerminalError):
    pass


class UnknownSpeedError(TerminalError):
    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"failed to get baud speed '{code}'")


class ConfigurationError(SttylError):
    def __init__(self, setting: str, reason: str) -> None:
        self.setting = setting
        super().__init__(f"invalid setting '{setting}': {reason}")
