# Errors raised by the scheduling services. None of them is retryable: each one
# reports a caller mistake detected before any state was changed.


class MedError(Exception):
    """Base class for medical centre scheduling errors."""

    default_message = "medical centre error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidSpecialityError(MedError, ValueError):
    default_message = "speciality is not offered by the centre"


class UnknownDoctorError(MedError, LookupError):
    default_message = "no doctor with this id"


class InvalidTimeRangeError(MedError, ValueError):
    default_message = "start time must be before end time"


class InvalidTimeError(InvalidTimeRangeError):
    """Raised when a time of day is not a valid "HH:MM" string."""

    default_message = "time must be formatted as HH:MM"


class InvalidDurationError(InvalidTimeRangeError):
    default_message = "slot duration must be positive and fit in the time range"


class NoScheduleError(MedError, LookupError):
    default_message = "doctor has no schedule on this date"


class SlotNotFoundError(MedError, LookupError):
    default_message = "slot is not part of the doctor's schedule"


class SlotTakenError(MedError, ValueError):
    default_message = "slot is already booked"


class UnknownAppointmentError(MedError, LookupError):
    default_message = "no appointment with this id"


class DoctorMismatchError(MedError, ValueError):
    default_message = "appointment does not belong to this doctor"


class AppointmentNotAcceptedError(MedError, ValueError):
    default_message = "patient has not been accepted for this appointment"


class CurrentDateNotSetError(MedError):
    default_message = "current date has not been set"


class NoAppointmentTodayError(MedError, LookupError):
    default_message = "patient has no appointment to accept today"


class UndefinedRateError(MedError, ArithmeticError):
    """Raised when a rate would divide by zero."""

    default_message = "rate is undefined without any appointments"
