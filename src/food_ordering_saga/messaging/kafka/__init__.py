from .connection import KafkaConnectionManager
from .transport import KafkaTransport

__all__ = ["KafkaConnectionManager", "KafkaTransport"]
