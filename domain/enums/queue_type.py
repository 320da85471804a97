"""Queue type enumeration for ranked leaderboards."""
from enum import Enum


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    The value is the queue name used by the /league endpoints.
    """

    RANKED_SOLO_5x5 = "RANKED_SOLO_5x5"  # Solo/Duo Queue
    RANKED_FLEX_SR = "RANKED_FLEX_SR"    # Flex 5v5 Queue

    @property
    def api_queue_name(self) -> str:
        return self.value

    @classmethod
    def ranked_queues(cls) -> list['QueueType']:
        """Get all ranked queue types."""
        return [cls.RANKED_SOLO_5x5, cls.RANKED_FLEX_SR]
