"""Errors raised by the rank-progress subsystem."""


class RankProgressError(Exception):
    pass


class AnchorValidationError(RankProgressError):
    """Current rank is missing or malformed. Raised before any I/O."""


class WindowValidationError(RankProgressError):
    """Match window is larger than the configured window size."""


class HistoryFetchError(RankProgressError):
    """Match history or league data could not be fetched."""


class CacheWriteError(RankProgressError):
    """A trajectory row could not be persisted."""
