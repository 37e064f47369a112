"""sui-readable: plain-language explanations of Sui transactions."""

__version__ = "0.1.0"
