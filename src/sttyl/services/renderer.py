"""Human-readable rendering of terminal settings."""

from __future__ import annotations

from collections.abc import Callable

from sttyl.core.state import AttributeSnapshot, Geometry
from sttyl.registry import Registry
from sttyl.utils.terminal import baud_rate

CHAR_MASK = 64


class Renderer:
    def __init__(
        self,
        registry: Registry,
        *,
        vdisable: int = 0,
        undef_marker: str = "<undef>",
        negation: str = "-",
        speed: Callable[[int], int] = baud_rate,
    ) -> None:
        self.registry = registry
        self.vdisable = vdisable
        self.undef_marker = undef_marker
        self.negation = negation
        self.speed = speed

    def render(self, snapshot: AttributeSnapshot, geometry: Geometry) -> str:
        lines = [
            self.render_header(snapshot, geometry),
            self.render_chars(snapshot),
            self.render_flags(snapshot),
        ]
        return "\n".join(line for line in lines if line) + "\n"

    def render_header(self, snapshot: AttributeSnapshot, geometry: Geometry) -> str:
        baud = self.speed(snapshot.ospeed)
        return f"speed {baud} baud; rows {geometry.rows}; cols {geometry.cols};"

    def render_chars(self, snapshot: AttributeSnapshot) -> str:
        if not self.registry.chars:
            return ""
        entries = [
            f"{char.name} = {self.format_char(snapshot.char(char.index))};"
            for char in self.registry.chars
        ]
        return "cchars: " + " ".join(entries)

    def render_flags(self, snapshot: AttributeSnapshot) -> str:
        lines = []
        for group, flags in self.registry.groups():
            names = [
                flag.name if snapshot.is_set(flag) else f"{self.negation}{flag.name}"
                for flag in flags
            ]
            lines.append(f"{group.label}: " + " ".join(names))
        return "\n".join(lines)

    def format_char(self, value: int) -> str:
        """Render a control character slot.

        Control codes use caret notation: the byte XORed with 64, so 3 is
        ``^C`` and DEL (127) is ``^?``.
        """

        if value == self.vdisable:
            return self.undef_marker
        if value < 32 or value == 127:
            return f"^{chr(value ^ CHAR_MASK)}"
        return chr(value)
