"""Epic effort estimation: multi-factor scoring, Fibonacci points and delivery timelines."""

from epic_estimate.version import __version__

__all__ = ["__version__"]
