"""Typer CLI for sttyl."""

from __future__ import annotations

import click
import typer
from typer.core import TyperCommand

from sttyl.config import load_settings
from sttyl.core.app import build_context
from sttyl.core.errors import SttylError
from sttyl.logging import configure_logging

app = typer.Typer(add_completion=False)


class RawTokensCommand(TyperCommand):
    """Keeps the argument vector exactly as given, ``--`` included."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta["sttyl.tokens"] = list(args)
        return super().parse_args(ctx, args)


@app.command(
    cls=RawTokensCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def stty(ctx: typer.Context) -> None:
    """Show or change terminal line settings."""

    program = ctx.find_root().info_name or "sttyl"
    try:
        settings = load_settings()
        configure_logging(settings)
        context = build_context(settings, program=program)
        report = context.run(ctx.meta["sttyl.tokens"])
    except SttylError as exc:
        typer.echo(exc.diagnostic(program), err=True)
        raise typer.Exit(code=1) from exc
    if report is not None:
        typer.echo(report, nl=False)
