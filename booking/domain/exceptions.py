class BookingError(Exception):
    """Base exception for all booking-related errors."""


class UnknownAppointmentKindError(BookingError):
    """Raised when no creator is registered for the requested kind."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"Unknown appointment kind: {kind!r}")


class MissingSpecialtyError(BookingError):
    """Raised when a specialist appointment is requested without a specialty."""

    def __init__(self, patient_name: str) -> None:
        self.patient_name = patient_name
        super().__init__(f"Specialist appointment for {patient_name} requires a specialty")
