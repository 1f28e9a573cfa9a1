import pytest
from pydantic import ValidationError

from medcentre.core.config import Settings
from medcentre.core.exceptions import (
    NoScheduleError,
    SlotNotFoundError,
    SlotTakenError,
    UnknownAppointmentError,
    UnknownDoctorError,
)
from medcentre.manager import SchedulingManager
from medcentre.models.appointment import AppointmentStatus

DATE = "2024-01-10"


class TestSetAppointment:
    def test_returns_id_and_fields(self, clinic):
        app_id = clinic.set_appointment("AAA", "Paolo", "Conti", "D1", DATE, "09:30-10:00")
        assert clinic.get_appointment_doctor(app_id) == "D1"
        assert clinic.get_appointment_patient(app_id) == "AAA"
        assert clinic.get_appointment_time(app_id) == "09:30"
        assert clinic.get_appointment_date(app_id) == DATE

    def test_new_appointment_is_booked(self, clinic):
        app_id = clinic.set_appointment("AAA", "Paolo", "Conti", "D1", DATE, "09:00-09:30")
        appointment = clinic.get_appointment(app_id)
        assert appointment.status == AppointmentStatus.BOOKED
        assert appointment.slot == "09:00-09:30"

    def test_unknown_doctor(self, clinic):
        with pytest.raises(UnknownDoctorError):
            clinic.set_appointment("AAA", "Paolo", "Conti", "D9", DATE, "09:00-09:30")

    def test_no_schedule_on_date(self, clinic):
        with pytest.raises(NoScheduleError):
            clinic.set_appointment("AAA", "Paolo", "Conti", "D1", "2024-05-05", "09:00-09:30")

    @pytest.mark.parametrize("slot", ["09:00-10:00", "09:15-09:45", "14:00-14:20", ""])
    def test_slot_not_in_schedule(self, clinic, slot):
        with pytest.raises(SlotNotFoundError):
            clinic.set_appointment("AAA", "Paolo", "Conti", "D1", DATE, slot)
        assert clinic.list_appointments("D1", DATE) == []

    def test_double_booking_allowed_by_default(self, clinic):
        ids = {
            clinic.set_appointment(ssn, "P", "Q", "D1", DATE, "09:00-09:30")
            for ssn in ("AAA", "BBB", "CCC")
        }
        assert len(ids) == 3

    def test_exclusive_slots(self):
        manager = SchedulingManager(settings=Settings(_env_file=None, exclusive_slots=True))
        manager.add_specialities("Cardiology")
        manager.add_doctor("D1", "Anna", "Bianchi", "Cardiology")
        manager.add_daily_schedule("D1", DATE, "09:00", "10:00", 30)
        manager.set_appointment("AAA", "P", "Q", "D1", DATE, "09:00-09:30")
        with pytest.raises(SlotTakenError):
            manager.set_appointment("BBB", "P", "Q", "D1", DATE, "09:00-09:30")
        manager.set_appointment("BBB", "P", "Q", "D1", DATE, "09:30-10:00")
        assert manager.list_appointments("D1", DATE) == ["09:00=AAA", "09:30=BBB"]


class TestAppointmentQueries:
    @pytest.mark.parametrize(
        "query",
        ["get_appointment_doctor", "get_appointment_patient", "get_appointment_time", "get_appointment_date"],
    )
    def test_unknown_id(self, clinic, query):
        with pytest.raises(UnknownAppointmentError):
            getattr(clinic, query)("missing")

    def test_listing_keeps_booking_order(self, clinic):
        clinic.set_appointment("BBB", "P", "Q", "D1", DATE, "09:30-10:00")
        clinic.set_appointment("AAA", "P", "Q", "D1", DATE, "09:00-09:30")
        clinic.set_appointment("CCC", "P", "Q", "D2", DATE, "14:00-14:20")
        assert clinic.list_appointments("D1", DATE) == ["09:30=BBB", "09:00=AAA"]
        assert clinic.list_appointments("D2", DATE) == ["14:00=CCC"]
        assert clinic.list_appointments("D1", "2024-01-11") == []


class TestAppointmentRecord:
    def test_record_fields_are_frozen(self, clinic):
        app_id = clinic.set_appointment("AAA", "Paolo", "Conti", "D1", DATE, "09:00-09:30")
        record = clinic.state.appointments[app_id]
        with pytest.raises(ValidationError):
            record.slot = "09:30-10:00"
        record.accept()
        assert record.status == AppointmentStatus.ACCEPTED
        assert record.slot == "09:00-09:30"

    def test_public_view_carries_patient_name(self, clinic):
        app_id = clinic.set_appointment("AAA", "Paolo", "Conti", "D1", DATE, "09:00-09:30")
        public = clinic.get_appointment(app_id)
        assert (public.name, public.surname) == ("Paolo", "Conti")
