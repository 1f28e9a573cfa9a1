from medcentre.models.appointment import (
    Appointment,
    AppointmentCreate,
    AppointmentPublic,
    AppointmentStatus,
)
from medcentre.models.doctor import Doctor, DoctorCreate, DoctorPublic
from medcentre.models.state import MedCentreState

__all__ = [
    "Appointment",
    "AppointmentCreate",
    "AppointmentPublic",
    "AppointmentStatus",
    "Doctor",
    "DoctorCreate",
    "DoctorPublic",
    "MedCentreState",
]
