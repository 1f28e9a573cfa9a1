from sqlmodel import Field, SQLModel


class DoctorBase(SQLModel):
    name: str
    surname: str
    speciality: str


class Doctor(DoctorBase):
    id: str
    # date -> slot labels ("HH:MM-HH:MM") in the order they were generated
    schedules: dict[str, list[str]] = Field(default_factory=dict)

    def is_specialist(self, speciality: str) -> bool:
        return self.speciality == speciality

    def has_schedule(self, date: str) -> bool:
        return date in self.schedules

    def slots_on(self, date: str) -> list[str] | None:
        return self.schedules.get(date)

    def total_slots(self) -> int:
        return sum(len(slots) for slots in self.schedules.values())


class DoctorCreate(DoctorBase):
    id: str


class DoctorPublic(DoctorBase):
    id: str
