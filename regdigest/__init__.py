"""regdigest: sector/keyword matching and digest dispatch for regulatory updates."""

__version__ = "0.1.0"
