"""Terminal attribute containers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sttyl.registry import FlagDescriptor, ModeGroup

_MODE_FIELDS: dict[ModeGroup, str] = {
    ModeGroup.IFLAG: "iflag",
    ModeGroup.OFLAG: "oflag",
    ModeGroup.CFLAG: "cflag",
    ModeGroup.LFLAG: "lflag",
}


@dataclass(slots=True)
class Geometry:
    rows: int
    cols: int


@dataclass(slots=True)
class AttributeSnapshot:
    """In-memory copy of a terminal's line discipline settings.

    Control characters are held as plain integers regardless of whether
    ``termios`` handed them over as one-byte ``bytes`` or as ``int``
    (``VMIN``/``VTIME`` in non-canonical mode).
    """

    iflag: int = 0
    oflag: int = 0
    cflag: int = 0
    lflag: int = 0
    ispeed: int = 0
    ospeed: int = 0
    cc: list[int] = field(default_factory=list)

    @classmethod
    def from_termios(cls, attrs: list[Any]) -> AttributeSnapshot:
        iflag, oflag, cflag, lflag, ispeed, ospeed, cc = attrs
        chars = [c[0] if isinstance(c, (bytes, bytearray)) else int(c) for c in cc]
        return cls(iflag, oflag, cflag, lflag, ispeed, ospeed, chars)

    def as_termios(self) -> list[Any]:
        return [
            self.iflag,
            self.oflag,
            self.cflag,
            self.lflag,
            self.ispeed,
            self.ospeed,
            list(self.cc),
        ]

    def copy(self) -> AttributeSnapshot:
        return AttributeSnapshot.from_termios(self.as_termios())

    def mode(self, group: ModeGroup) -> int:
        return getattr(self, _MODE_FIELDS[group])

    def set_mode(self, group: ModeGroup, value: int) -> None:
        setattr(self, _MODE_FIELDS[group], value)

    def is_set(self, flag: FlagDescriptor) -> bool:
        return self.mode(flag.group) & flag.mask == flag.mask

    def set_flag(self, flag: FlagDescriptor) -> None:
        self.set_mode(flag.group, self.mode(flag.group) | flag.mask)

    def clear_flag(self, flag: FlagDescriptor) -> None:
        self.set_mode(flag.group, self.mode(flag.group) & ~flag.mask)

    def char(self, index: int) -> int:
        return self.cc[index]

    def set_char(self, index: int, value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"control character out of range: {value}")
        self.cc[index] = value
