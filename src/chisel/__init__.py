"""chisel - CSS selector builder with small date and future utilities."""

__version__ = "0.1.0"
