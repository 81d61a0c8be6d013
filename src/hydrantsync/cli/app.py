"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.logging import RichHandler

from hydrantsync import (
    AuthenticationError,
    ConfigError,
    ProviderError,
    SyncError,
    TagFormatError,
    WaypointLoadError,
)

# Third-party loggers that are only useful when debugging the transport.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _configure_logging(console: Console, *, verbose: bool) -> None:
    import hydrantsync.cli as cli

    level = cli.logging.DEBUG if verbose else cli.logging.INFO
    cli.logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=verbose)],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        cli.logging.getLogger(name).setLevel(cli.logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    import hydrantsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    console = Console(stderr=True)
    _configure_logging(console, verbose=args.verbose)

    try:
        if args.command == "sync":
            cli._run_sync(args, console=console)
        elif args.command == "changesets":
            cli._run_changesets(args)
        return 0
    except (ConfigError, WaypointLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except (SyncError, TagFormatError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
