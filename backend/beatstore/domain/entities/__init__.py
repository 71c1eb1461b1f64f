from .beat import Beat
from .clock import Clock, system_clock

__all__ = [
    "Beat",
    "Clock",
    "system_clock",
]
