# File location: config/__init__.py
# Configuration package for the Gy charging core

from .diameter import DIAMETER_DEFAULTS, get_default

__all__ = ["DIAMETER_DEFAULTS", "get_default"]
