"""Module entrypoint for ``python -m hydrantsync``."""

from hydrantsync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
