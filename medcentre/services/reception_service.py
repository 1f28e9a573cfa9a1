import logging

from medcentre.core.exceptions import (
    AppointmentNotAcceptedError,
    CurrentDateNotSetError,
    DoctorMismatchError,
    NoAppointmentTodayError,
)
from medcentre.models.appointment import Appointment, AppointmentStatus
from medcentre.models.state import MedCentreState
from medcentre.services.appointment_service import count_appointments_on, get_appointment
from medcentre.services.doctor_service import get_doctor

logger = logging.getLogger(__name__)


def set_current_date(state: MedCentreState, date: str) -> int:
    """Open the reception day. Returns the number of appointments on that date."""
    state.current_date = date
    count = count_appointments_on(state, date)
    logger.info("Current date set to %s (%d appointment(s))", date, count)
    return count


def accept_patient(state: MedCentreState, ssn: str, current_date: str | None) -> Appointment:
    """Mark the patient's first appointment of current_date as accepted.

    An appointment already accepted or completed is returned unchanged.
    """
    if current_date is None:
        raise CurrentDateNotSetError()
    for appointment in state.appointments.values():
        if appointment.ssn == ssn and appointment.date == current_date:
            if appointment.status == AppointmentStatus.BOOKED:
                appointment.accept()
                logger.info("Patient %s accepted for appointment %s", ssn, appointment.id)
            return appointment
    raise NoAppointmentTodayError(f"patient {ssn!r} has no appointment on {current_date}")


def next_appointment(state: MedCentreState, doctor_id: str) -> str | None:
    for appointment in state.appointments.values():
        if appointment.doctor_id == doctor_id and appointment.status == AppointmentStatus.ACCEPTED:
            return appointment.id
    return None


def complete_appointment(state: MedCentreState, doctor_id: str, appointment_id: str) -> Appointment:
    get_doctor(state, doctor_id)
    appointment = get_appointment(state, appointment_id)
    if appointment.doctor_id != doctor_id:
        raise DoctorMismatchError(
            f"appointment {appointment_id} belongs to doctor {appointment.doctor_id!r}, not {doctor_id!r}"
        )
    if appointment.status != AppointmentStatus.ACCEPTED:
        raise AppointmentNotAcceptedError(
            f"appointment {appointment_id} is {appointment.status.value}, expected accepted"
        )
    appointment.complete()
    logger.info("Appointment %s completed by doctor %s", appointment_id, doctor_id)
    return appointment
