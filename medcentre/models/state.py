from dataclasses import dataclass, field

from medcentre.models.appointment import Appointment
from medcentre.models.doctor import Doctor


@dataclass
class MedCentreState:
    """Authoritative in-memory store shared by the services.

    Doctors are listed by id; appointments keep booking order, which is the
    order first-match lookups (accept, next appointment, listings) walk.
    """

    specialities: set[str] = field(default_factory=set)
    doctors: dict[str, Doctor] = field(default_factory=dict)
    appointments: dict[str, Appointment] = field(default_factory=dict)
    current_date: str | None = None

    def doctors_by_id(self) -> list[Doctor]:
        return [self.doctors[doctor_id] for doctor_id in sorted(self.doctors)]
