"""Name tables mapping stty-style options onto termios bits and slots."""

from __future__ import annotations

import termios
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class ModeGroup(str, Enum):
    """The four termios mode words."""

    IFLAG = "iflag"
    OFLAG = "oflag"
    CFLAG = "cflag"
    LFLAG = "lflag"

    @property
    def label(self) -> str:
        return f"{self.value}s"


@dataclass(frozen=True, slots=True)
class FlagDescriptor:
    mask: int
    name: str
    group: ModeGroup


@dataclass(frozen=True, slots=True)
class CharDescriptor:
    index: int
    name: str


Descriptor = FlagDescriptor | CharDescriptor


class Registry:
    """Single namespace of flag and special-character options.

    Names are matched exactly (case-sensitive, no abbreviations). Iteration
    order is declaration order, which also fixes the order mode groups are
    rendered in.
    """

    def __init__(
        self,
        flags: Iterable[FlagDescriptor],
        chars: Iterable[CharDescriptor],
    ) -> None:
        self._flags: tuple[FlagDescriptor, ...] = tuple(flags)
        self._chars: tuple[CharDescriptor, ...] = tuple(chars)
        self._by_name: dict[str, Descriptor] = {}
        for entry in (*self._chars, *self._flags):
            if entry.name in self._by_name:
                raise ValueError(f"Duplicate option name: {entry.name}")
            self._by_name[entry.name] = entry

    @property
    def flags(self) -> tuple[FlagDescriptor, ...]:
        return self._flags

    @property
    def chars(self) -> tuple[CharDescriptor, ...]:
        return self._chars

    def lookup(self, name: str) -> Descriptor | None:
        return self._by_name.get(name)

    def lookup_char(self, name: str) -> CharDescriptor | None:
        entry = self._by_name.get(name)
        return entry if isinstance(entry, CharDescriptor) else None

    def lookup_flag(self, name: str) -> FlagDescriptor | None:
        entry = self._by_name.get(name)
        return entry if isinstance(entry, FlagDescriptor) else None

    def groups(self) -> Iterator[tuple[ModeGroup, list[FlagDescriptor]]]:
        """Yield flags bucketed by group, groups in order of first appearance."""

        buckets: dict[ModeGroup, list[FlagDescriptor]] = {}
        for flag in self._flags:
            buckets.setdefault(flag.group, []).append(flag)
        yield from buckets.items()

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


I, O, C, L = ModeGroup.IFLAG, ModeGroup.OFLAG, ModeGroup.CFLAG, ModeGroup.LFLAG

FLAGS: tuple[FlagDescriptor, ...] = (
    # Input processing
    FlagDescriptor(termios.IGNBRK, "ignbrk", I),
    FlagDescriptor(termios.BRKINT, "brkint", I),
    FlagDescriptor(termios.INLCR, "inlcr", I),
    FlagDescriptor(termios.IGNCR, "igncr", I),
    FlagDescriptor(termios.ICRNL, "icrnl", I),
    FlagDescriptor(termios.ISTRIP, "istrip", I),
    FlagDescriptor(termios.IXON, "ixon", I),
    FlagDescriptor(termios.IXOFF, "ixoff", I),
    # Output processing
    FlagDescriptor(termios.OPOST, "opost", O),
    FlagDescriptor(termios.ONLCR, "onlcr", O),
    # Hardware control
    FlagDescriptor(termios.CSTOPB, "cstopb", C),
    FlagDescriptor(termios.CREAD, "cread", C),
    FlagDescriptor(termios.PARENB, "parenb", C),
    FlagDescriptor(termios.HUPCL, "hupcl", C),
    FlagDescriptor(termios.CLOCAL, "clocal", C),
    # Local modes
    FlagDescriptor(termios.ISIG, "isig", L),
    FlagDescriptor(termios.ICANON, "icanon", L),
    FlagDescriptor(termios.IEXTEN, "iexten", L),
    FlagDescriptor(termios.ECHO, "echo", L),
    FlagDescriptor(termios.ECHOE, "echoe", L),
    FlagDescriptor(termios.ECHOK, "echok", L),
    FlagDescriptor(termios.ECHONL, "echonl", L),
    FlagDescriptor(termios.NOFLSH, "noflsh", L),
    FlagDescriptor(termios.TOSTOP, "tostop", L),
)

CHARS: tuple[CharDescriptor, ...] = (
    CharDescriptor(termios.VEOF, "eof"),
    CharDescriptor(termios.VEOL, "eol"),
    CharDescriptor(termios.VERASE, "erase"),
    CharDescriptor(termios.VINTR, "intr"),
    CharDescriptor(termios.VKILL, "kill"),
    CharDescriptor(termios.VQUIT, "quit"),
    CharDescriptor(termios.VSUSP, "susp"),
)

DEFAULT_REGISTRY = Registry(FLAGS, CHARS)
