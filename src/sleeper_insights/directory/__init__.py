"""Player reference data collaborators."""

from .cache import CacheEntry, PlayerDirectoryCache
from .players import PlayerDirectory, display_name

__all__ = ["CacheEntry", "PlayerDirectory", "PlayerDirectoryCache", "display_name"]
