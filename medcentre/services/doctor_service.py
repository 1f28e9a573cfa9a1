import logging

from medcentre.core.exceptions import InvalidSpecialityError, UnknownDoctorError
from medcentre.models.doctor import Doctor, DoctorCreate, DoctorPublic
from medcentre.models.state import MedCentreState

logger = logging.getLogger(__name__)


def add_specialities(state: MedCentreState, *names: str) -> None:
    state.specialities.update(names)


def list_specialities(state: MedCentreState) -> list[str]:
    return sorted(state.specialities)


def get_doctor(state: MedCentreState, doctor_id: str) -> Doctor:
    doctor = state.doctors.get(doctor_id)
    if doctor is None:
        raise UnknownDoctorError(f"no doctor with id {doctor_id!r}")
    return doctor


def create_doctor(state: MedCentreState, data: DoctorCreate) -> Doctor:
    if data.speciality not in state.specialities:
        raise InvalidSpecialityError(f"speciality {data.speciality!r} is not offered")
    if data.id in state.doctors:
        # Same id replaces the previous record, schedules included
        logger.warning("Doctor %s re-registered, previous record replaced", data.id)
    doctor = Doctor(id=data.id, name=data.name, surname=data.surname, speciality=data.speciality)
    state.doctors[doctor.id] = doctor
    logger.info("Registered doctor %s (%s)", doctor.id, doctor.speciality)
    return doctor


def list_specialist_names(state: MedCentreState, speciality: str) -> list[str]:
    """Names of the doctors with exactly this speciality, by doctor id."""
    return [d.name for d in state.doctors_by_id() if d.is_specialist(speciality)]


def doctor_to_public(doctor: Doctor) -> DoctorPublic:
    return DoctorPublic(
        id=doctor.id,
        name=doctor.name,
        surname=doctor.surname,
        speciality=doctor.speciality,
    )
