"""Allow running with ``python -m barrier_closures``."""

from barrier_closures.main import run

run()
