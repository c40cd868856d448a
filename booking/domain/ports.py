from typing import Protocol


class Observer(Protocol):
    """Receives a callback whenever an appointment's status changes."""

    def notify(self, subject: "BookableAppointment") -> None:
        """Handle a status change on ``subject``."""
        ...


class BookableAppointment(Protocol):
    """Core appointment contract shared by entities and their decorators."""

    @property
    def patient_name(self) -> str: ...

    @property
    def schedule(self) -> str: ...

    @property
    def status(self) -> str: ...

    def attach(self, observer: Observer) -> None:
        """Register ``observer``. Duplicates are allowed."""
        ...

    def detach(self, observer: Observer) -> None:
        """Unregister the first occurrence of ``observer``; no-op if absent."""
        ...

    def change_status(self, new_status: str) -> None:
        """Set the status and notify every attached observer."""
        ...

    def describe(self) -> str:
        """Return a human-readable summary of the appointment."""
        ...
