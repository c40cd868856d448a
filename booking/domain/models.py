from abc import ABC, abstractmethod
from enum import Enum

from loguru import logger
from pydantic import BaseModel, PrivateAttr

from booking.domain.ports import Observer

DEFAULT_STATUS = "booked"


class AppointmentKind(str, Enum):
    """Appointment variants that a creator can produce."""

    GENERAL = "general"
    SPECIALIST = "specialist"


class Appointment(BaseModel, ABC):
    """A booking for a patient at a given slot, observable on status changes.

    Observers are kept in attachment order and duplicates are allowed. A
    status change notifies a snapshot of the list, so an observer may
    attach or detach others from inside ``notify`` without affecting the
    pass already in progress. Copies made with ``model_copy`` start with
    their own list holding the same observers.
    """

    patient_name: str
    schedule: str
    status: str = DEFAULT_STATUS

    _observers: list[Observer] = PrivateAttr(default_factory=list)

    def __copy__(self) -> "Appointment":
        copied = super().__copy__()
        copied._observers = list(self._observers)
        return copied

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        for index, attached in enumerate(self._observers):
            if attached is observer:
                del self._observers[index]
                return

    def change_status(self, new_status: str) -> None:
        self.status = new_status
        self._notify_observers()

    def _notify_observers(self) -> None:
        snapshot = list(self._observers)
        logger.debug(
            "Notifying {} observer(s) of status '{}' for {}",
            len(snapshot),
            self.status,
            self.patient_name,
        )
        for observer in snapshot:
            observer.notify(self)

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable summary including the current status."""


class GeneralAppointment(Appointment):
    """A general practice appointment."""

    def describe(self) -> str:
        return (
            f"General appointment for {self.patient_name} at {self.schedule} "
            f"(status: {self.status})"
        )


class SpecialistAppointment(Appointment):
    """An appointment with a specialist in a given field."""

    specialty: str

    def describe(self) -> str:
        return (
            f"Specialist appointment ({self.specialty}) for {self.patient_name} "
            f"at {self.schedule} (status: {self.status})"
        )
