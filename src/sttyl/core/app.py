"""sttyl composition root."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from sttyl.config import SttylSettings
from sttyl.core.state import AttributeSnapshot, Geometry
from sttyl.logging import get_logger
from sttyl.registry import DEFAULT_REGISTRY, Registry
from sttyl.services.renderer import Renderer
from sttyl.services.resolver import OptionResolver
from sttyl.utils.terminal import TerminalDevice


class Terminal(Protocol):
    def load(self) -> AttributeSnapshot: ...

    def commit(self, snapshot: AttributeSnapshot) -> None: ...

    def window_size(self) -> Geometry: ...


@dataclass(slots=True)
class SttylContext:
    program: str
    settings: SttylSettings
    registry: Registry
    terminal: Terminal
    resolver: OptionResolver
    renderer: Renderer

    def run(self, tokens: Sequence[str]) -> str | None:
        """Show the settings when no tokens are given, otherwise apply them.

        Returns the report to print, or ``None`` once changes are committed.
        Nothing is committed unless every token resolves.
        """

        snapshot = self.terminal.load()
        if not tokens:
            return self.renderer.render(snapshot, self.terminal.window_size())
        self.resolver.apply(tokens, snapshot)
        self.terminal.commit(snapshot)
        return None


def build_context(
    settings: SttylSettings,
    program: str | None = None,
    registry: Registry = DEFAULT_REGISTRY,
) -> SttylContext:
    terminal = TerminalDevice(settings.terminal.fd, settings.terminal.geometry_fd)
    resolver = OptionResolver(registry)
    renderer = Renderer(
        registry,
        vdisable=settings.display.vdisable,
        undef_marker=settings.display.undef_marker,
        negation=resolver.negation,
    )

    logger = get_logger("bootstrap")
    logger.debug("sttyl context ready for fd {}", settings.terminal.fd)

    return SttylContext(
        program=program or settings.app_name,
        settings=settings,
        registry=registry,
        terminal=terminal,
        resolver=resolver,
        renderer=renderer,
    )
