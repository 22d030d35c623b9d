"""Module entrypoint for running the Django development server."""

from __future__ import annotations

from sealer.cli import run_dev_server


def main() -> None:  # pragma: no cover - CLI entry
    run_dev_server()


if __name__ == "__main__":  # pragma: no cover
    main()
