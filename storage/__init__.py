"""Storage module - Firebase event store and publisher."""
from .firebase import FirebaseStore
from .publisher import EventPublisher

__all__ = ['FirebaseStore', 'EventPublisher']
