from .cache_purger import CachePurger, CachePurgeError, PurgeNotConfirmedError

__all__ = ["CachePurger", "CachePurgeError", "PurgeNotConfirmedError"]
