from medcentre.core.exceptions import UndefinedRateError
from medcentre.models.state import MedCentreState
from medcentre.services.appointment_service import list_appointments_for_doctor
from medcentre.services.doctor_service import get_doctor


def show_rate(state: MedCentreState, doctor_id: str, date: str) -> float:
    """Share of the doctor's appointments on date whose patient showed up."""
    get_doctor(state, doctor_id)
    appointments = list_appointments_for_doctor(state, doctor_id, date)
    if not appointments:
        raise UndefinedRateError(f"doctor {doctor_id!r} has no appointments on {date}")
    accepted = sum(1 for a in appointments if a.accepted)
    return accepted / len(appointments)


def schedule_completeness(state: MedCentreState) -> dict[str, float | None]:
    """Booked appointments over generated slots, per doctor id.

    Doctors without any generated slot map to None.
    """
    booked: dict[str, int] = {}
    for a in state.appointments.values():
        booked[a.doctor_id] = booked.get(a.doctor_id, 0) + 1
    out: dict[str, float | None] = {}
    for doctor in state.doctors_by_id():
        total = doctor.total_slots()
        out[doctor.id] = booked.get(doctor.id, 0) / total if total else None
    return out
