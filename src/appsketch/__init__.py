"""appsketch: domain-aware mock screens for generated application descriptions."""

__version__ = "0.1.0"
