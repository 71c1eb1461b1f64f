from .beat import BeatCreate, BeatUpdate, BeatResponse

__all__ = [
    "BeatCreate",
    "BeatUpdate",
    "BeatResponse",
]
