"""Queue type enumeration for ranked matches."""
from enum import Enum


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    LP trajectories are only tracked for solo/duo; flex is kept so match
    history entries from that queue can be recognised and skipped.
    """

    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue
    RANKED_FLEX_SR = 440   # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        """Get queue ID for match-v5 filters."""
        return self.value

    @property
    def api_queue_name(self) -> str:
        """Get queue name string used by league-v4 entries."""
        return self.name
