from .store import RecordStorePort

__all__ = [
    "RecordStorePort",
]
