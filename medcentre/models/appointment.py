from enum import Enum
from uuid import uuid4

from pydantic import PrivateAttr
from sqlmodel import Field, SQLModel

from medcentre.core.timeutils import slot_start


def _new_appointment_id() -> str:
    return str(uuid4())


class AppointmentStatus(str, Enum):
    BOOKED = "booked"
    ACCEPTED = "accepted"
    COMPLETED = "completed"


class AppointmentCreate(SQLModel):
    ssn: str
    name: str
    surname: str
    doctor_id: str
    date: str
    slot: str  # "HH:MM-HH:MM"


class Appointment(AppointmentCreate):
    """Booking record; only the status moves after creation."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=_new_appointment_id)
    _status: AppointmentStatus = PrivateAttr(default=AppointmentStatus.BOOKED)

    @property
    def status(self) -> AppointmentStatus:
        return self._status

    @property
    def accepted(self) -> bool:
        return self._status in (AppointmentStatus.ACCEPTED, AppointmentStatus.COMPLETED)

    @property
    def completed(self) -> bool:
        return self._status == AppointmentStatus.COMPLETED

    @property
    def time(self) -> str:
        """Start of the booked slot, "HH:MM"."""
        return slot_start(self.slot)

    def accept(self) -> None:
        self._status = AppointmentStatus.ACCEPTED

    def complete(self) -> None:
        self._status = AppointmentStatus.COMPLETED

    def to_listing(self) -> str:
        return f"{self.time}={self.ssn}"


class AppointmentPublic(SQLModel):
    id: str
    ssn: str
    name: str
    surname: str
    doctor_id: str
    date: str
    slot: str
    status: AppointmentStatus
