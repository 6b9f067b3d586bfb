"""
The MODEL layer holds the memoization record.
It has no knowledge of how an inverse is computed.
"""
from cachematrix.model.cache import CacheCell

__all__ = ["CacheCell"]
