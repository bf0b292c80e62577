"""sttyl console entrypoint."""

from __future__ import annotations

from sttyl.cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
