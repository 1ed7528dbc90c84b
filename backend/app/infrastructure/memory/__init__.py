from .in_memory_record_repository import InMemoryRecordRepository
from .seed_loader import SeedData, SeedLoader

__all__ = [
    "InMemoryRecordRepository",
    "SeedData",
    "SeedLoader",
]
