from .occupancy import (
    current_room,
    occupancy_label,
    room_occupancy,
)

__all__ = [
    "current_room",
    "occupancy_label",
    "room_occupancy",
]
