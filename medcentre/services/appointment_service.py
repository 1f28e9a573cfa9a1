import logging

from medcentre.core.exceptions import (
    NoScheduleError,
    SlotNotFoundError,
    SlotTakenError,
    UnknownAppointmentError,
)
from medcentre.models.appointment import Appointment, AppointmentCreate, AppointmentPublic
from medcentre.models.state import MedCentreState
from medcentre.services.doctor_service import get_doctor

logger = logging.getLogger(__name__)


def _is_slot_booked(state: MedCentreState, doctor_id: str, date: str, slot: str) -> bool:
    return any(
        a.doctor_id == doctor_id and a.date == date and a.slot == slot
        for a in state.appointments.values()
    )


def create_appointment(
    state: MedCentreState, data: AppointmentCreate, exclusive_slots: bool = False
) -> Appointment:
    doctor = get_doctor(state, data.doctor_id)
    slots = doctor.slots_on(data.date)
    if slots is None:
        raise NoScheduleError(f"doctor {data.doctor_id!r} has no schedule on {data.date}")
    if data.slot not in slots:
        raise SlotNotFoundError(f"slot {data.slot!r} is not scheduled for {data.doctor_id!r} on {data.date}")
    # Without exclusivity several patients may share a slot
    if exclusive_slots and _is_slot_booked(state, data.doctor_id, data.date, data.slot):
        raise SlotTakenError(f"slot {data.slot} on {data.date} is already booked")
    appointment = Appointment(**data.model_dump())
    state.appointments[appointment.id] = appointment
    logger.info(
        "Appointment %s booked: doctor %s, %s %s", appointment.id, data.doctor_id, data.date, data.slot
    )
    return appointment


def get_appointment(state: MedCentreState, appointment_id: str) -> Appointment:
    appointment = state.appointments.get(appointment_id)
    if appointment is None:
        raise UnknownAppointmentError(f"no appointment with id {appointment_id!r}")
    return appointment


def list_appointments_for_doctor(state: MedCentreState, doctor_id: str, date: str) -> list[Appointment]:
    """Appointments in booking order, not sorted by time."""
    return [
        a for a in state.appointments.values() if a.doctor_id == doctor_id and a.date == date
    ]


def count_appointments_on(state: MedCentreState, date: str) -> int:
    return sum(1 for a in state.appointments.values() if a.date == date)


def appointment_to_public(a: Appointment) -> AppointmentPublic:
    return AppointmentPublic(
        id=a.id,
        ssn=a.ssn,
        name=a.name,
        surname=a.surname,
        doctor_id=a.doctor_id,
        date=a.date,
        slot=a.slot,
        status=a.status,
    )
