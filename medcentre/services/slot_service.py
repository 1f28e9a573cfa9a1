import logging

from medcentre.core.exceptions import InvalidDurationError, InvalidTimeRangeError
from medcentre.core.timeutils import parse_time, slot_label
from medcentre.models.state import MedCentreState
from medcentre.services.doctor_service import get_doctor

logger = logging.getLogger(__name__)


def _slot_labels(start: int, end: int, duration: int) -> list[str]:
    """Consecutive slots of `duration` minutes from `start`; a remainder shorter than a slot is dropped."""
    slots: list[str] = []
    current = start
    for _ in range((end - start) // duration):
        slots.append(slot_label(current, current + duration))
        current += duration
    return slots


def add_daily_schedule(
    state: MedCentreState, doctor_id: str, date: str, start: str, end: str, duration: int
) -> int:
    """Append slots between start and end to the doctor's schedule for date.

    Returns the number of slots added by this call.
    """
    doctor = get_doctor(state, doctor_id)
    start_min = parse_time(start)
    end_min = parse_time(end)
    if start_min >= end_min:
        raise InvalidTimeRangeError(f"start {start} is not before end {end}")
    if duration <= 0 or duration > end_min - start_min:
        raise InvalidDurationError(
            f"duration {duration} does not fit between {start} and {end}"
        )
    slots = _slot_labels(start_min, end_min, duration)
    doctor.schedules.setdefault(date, []).extend(slots)
    logger.info("Doctor %s: %d slot(s) added on %s (%s-%s)", doctor_id, len(slots), date, start, end)
    return len(slots)


def get_schedule(state: MedCentreState, doctor_id: str, date: str) -> list[str] | None:
    """Slot labels for the date, or None when no schedule was defined."""
    slots = get_doctor(state, doctor_id).slots_on(date)
    if slots is None:
        return None
    return list(slots)


def find_slots(state: MedCentreState, date: str, speciality: str) -> dict[str, list[str]]:
    """Slots per doctor id for specialists that work on date."""
    out: dict[str, list[str]] = {}
    for doctor in state.doctors_by_id():
        if doctor.is_specialist(speciality) and doctor.has_schedule(date):
            out[doctor.id] = list(doctor.schedules[date])
    return out
