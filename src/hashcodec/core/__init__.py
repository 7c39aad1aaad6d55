"""Codec core: big-integer arithmetic, alphabet partitioning and Hashids."""
from . import bigmath
from .alphabet import build_partition, shuffle
from .codec import Hashids

__all__ = ["Hashids", "bigmath", "build_partition", "shuffle"]
