"""dkgctl — DKG node plugin host."""

__version__ = "1.0.0"
