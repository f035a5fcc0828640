"""Input and persistence adapters."""
