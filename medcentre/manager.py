"""SchedulingManager: the entry point callers use to drive the medical centre model."""

from medcentre.core.config import Settings, settings as default_settings
from medcentre.models.appointment import AppointmentCreate, AppointmentPublic
from medcentre.models.doctor import DoctorCreate, DoctorPublic
from medcentre.models.state import MedCentreState
from medcentre.services import (
    analytics_service,
    appointment_service,
    doctor_service,
    reception_service,
    slot_service,
)


class SchedulingManager:
    """Specialities, doctors, schedules and appointments of one medical centre.

    All state lives in a single MedCentreState; doctors and appointments refer
    to each other by id only.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings
        self.state = MedCentreState()

    # Specialities and doctors

    def add_specialities(self, *specialities: str) -> None:
        doctor_service.add_specialities(self.state, *specialities)

    def get_specialities(self) -> list[str]:
        return doctor_service.list_specialities(self.state)

    def add_doctor(self, doctor_id: str, name: str, surname: str, speciality: str) -> None:
        data = DoctorCreate(id=doctor_id, name=name, surname=surname, speciality=speciality)
        doctor_service.create_doctor(self.state, data)

    def get_specialists(self, speciality: str) -> list[str]:
        return doctor_service.list_specialist_names(self.state, speciality)

    def get_doctor(self, doctor_id: str) -> DoctorPublic:
        return doctor_service.doctor_to_public(doctor_service.get_doctor(self.state, doctor_id))

    def get_doc_name(self, doctor_id: str) -> str:
        return doctor_service.get_doctor(self.state, doctor_id).name

    def get_doc_surname(self, doctor_id: str) -> str:
        return doctor_service.get_doctor(self.state, doctor_id).surname

    # Schedules

    def add_daily_schedule(
        self, doctor_id: str, date: str, start: str, end: str, duration: int | None = None
    ) -> int:
        if duration is None:
            duration = self.settings.default_slot_duration_minutes
        return slot_service.add_daily_schedule(self.state, doctor_id, date, start, end, duration)

    def get_schedules(self, doctor_id: str, date: str) -> list[str] | None:
        return slot_service.get_schedule(self.state, doctor_id, date)

    def find_slots(self, date: str, speciality: str) -> dict[str, list[str]]:
        return slot_service.find_slots(self.state, date, speciality)

    # Booking and appointment queries

    def set_appointment(
        self, ssn: str, name: str, surname: str, doctor_id: str, date: str, slot: str
    ) -> str:
        data = AppointmentCreate(
            ssn=ssn, name=name, surname=surname, doctor_id=doctor_id, date=date, slot=slot
        )
        appointment = appointment_service.create_appointment(
            self.state, data, exclusive_slots=self.settings.exclusive_slots
        )
        return appointment.id

    def get_appointment(self, appointment_id: str) -> AppointmentPublic:
        appointment = appointment_service.get_appointment(self.state, appointment_id)
        return appointment_service.appointment_to_public(appointment)

    def get_appointment_doctor(self, appointment_id: str) -> str:
        return appointment_service.get_appointment(self.state, appointment_id).doctor_id

    def get_appointment_patient(self, appointment_id: str) -> str:
        return appointment_service.get_appointment(self.state, appointment_id).ssn

    def get_appointment_time(self, appointment_id: str) -> str:
        return appointment_service.get_appointment(self.state, appointment_id).time

    def get_appointment_date(self, appointment_id: str) -> str:
        return appointment_service.get_appointment(self.state, appointment_id).date

    def list_appointments(self, doctor_id: str, date: str) -> list[str]:
        """Entries formatted "HH:MM=SSN", in booking order."""
        appointments = appointment_service.list_appointments_for_doctor(self.state, doctor_id, date)
        return [a.to_listing() for a in appointments]

    # Reception

    @property
    def current_date(self) -> str | None:
        return self.state.current_date

    def set_current_date(self, date: str) -> int:
        return reception_service.set_current_date(self.state, date)

    def accept(self, ssn: str) -> str:
        appointment = reception_service.accept_patient(self.state, ssn, self.state.current_date)
        return appointment.id

    def next_appointment(self, doctor_id: str) -> str | None:
        return reception_service.next_appointment(self.state, doctor_id)

    def complete_appointment(self, doctor_id: str, appointment_id: str) -> None:
        reception_service.complete_appointment(self.state, doctor_id, appointment_id)

    # Analytics

    def show_rate(self, doctor_id: str, date: str) -> float:
        return analytics_service.show_rate(self.state, doctor_id, date)

    def schedule_completeness(self) -> dict[str, float | None]:
        return analytics_service.schedule_completeness(self.state)
