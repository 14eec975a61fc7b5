from django.db.models import Count, Q

from residents.models import Room, RoomAssignment


OCCUPANCY_VACANT = "Vacant"
OCCUPANCY_PARTIAL = "Partial"
OCCUPANCY_FULL = "Full"


def occupancy_label(current_occupants, max_capacity):
    if current_occupants == 0:
        return OCCUPANCY_VACANT
    if current_occupants < max_capacity:
        return OCCUPANCY_PARTIAL
    return OCCUPANCY_FULL


def room_occupancy():
    """
    Rooms with their live occupant count.

    Only assignments without an end date count as occupying a bed.
    Each room gets `current_occupants` and `occupancy` attributes.
    """
    rooms = (
        Room.objects
        .annotate(
            current_occupants=Count(
                "assignments",
                filter=Q(assignments__end_date__isnull=True),
            )
        )
        .order_by("room_number")
    )

    result = []
    for room in rooms:
        room.occupancy = occupancy_label(room.current_occupants, room.max_capacity)
        result.append(room)

    return result


def current_room(resident):
    assignment = (
        RoomAssignment.objects
        .select_related("room")
        .filter(resident=resident, end_date__isnull=True)
        .order_by("-start_date")
        .first()
    )
    return assignment.room if assignment else None
