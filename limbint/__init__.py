"""Arbitrary-precision signed integers built on base 2**32 limbs, with modular helpers and a demo command."""

__version__ = "0.1.0"
__all__ = ["limbs", "integer", "modular", "demo"]