"""``python -m timeofday``: same behaviour and exit statuses as the console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
