"""Named codec connections."""
from .base import ConnectionManager
from .hashids import HashidsManager, make_codec

__all__ = ["ConnectionManager", "HashidsManager", "make_codec"]
