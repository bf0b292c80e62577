"""Apply command-line option tokens to an attribute snapshot."""

from __future__ import annotations

from collections.abc import Sequence

from sttyl.core.errors import (
    IllegalArgumentError,
    InvalidArgumentError,
    MissingArgumentError,
)
from sttyl.core.state import AttributeSnapshot
from sttyl.logging import get_logger
from sttyl.registry import CharDescriptor, Registry

NEGATION = "-"


class OptionResolver:
    """Resolve tokens left to right against a registry.

    A special-character name consumes the following token as its value; a
    flag name sets its bit, and a flag name behind the negation marker
    clears it. The first unresolvable token raises, leaving the caller to
    discard the partially mutated snapshot.
    """

    def __init__(self, registry: Registry, negation: str = NEGATION) -> None:
        self.registry = registry
        self.negation = negation
        self.logger = get_logger("resolver")

    def apply(self, tokens: Sequence[str], snapshot: AttributeSnapshot) -> AttributeSnapshot:
        position = 0
        while position < len(tokens):
            token = tokens[position]
            char = self.registry.lookup_char(self._strip(token))
            if char is not None:
                if position + 1 >= len(tokens):
                    raise MissingArgumentError(token)
                self.change_char(char, tokens[position + 1], snapshot)
                position += 2
            else:
                self.toggle_flag(token, snapshot)
                position += 1
        return snapshot

    def change_char(self, char: CharDescriptor, value: str, snapshot: AttributeSnapshot) -> None:
        if len(value) != 1 or not value.isascii():
            raise InvalidArgumentError(value)
        snapshot.set_char(char.index, ord(value))
        self.logger.debug("{} set to {!r}", char.name, value)

    def toggle_flag(self, token: str, snapshot: AttributeSnapshot) -> None:
        enable = not token.startswith(self.negation)
        flag = self.registry.lookup_flag(token if enable else token[len(self.negation):])
        if flag is None:
            raise IllegalArgumentError(token)
        if enable:
            snapshot.set_flag(flag)
        else:
            snapshot.clear_flag(flag)
        self.logger.debug("{} {}", flag.name, "on" if enable else "off")

    def _strip(self, token: str) -> str:
        if token.startswith(self.negation):
            return token[len(self.negation):]
        return token
