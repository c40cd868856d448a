from typing import TypeVar

from loguru import logger

from booking.domain.ports import BookableAppointment, Observer

D = TypeVar("D", bound="AppointmentDecorator")


class AppointmentDecorator:
    """Wraps an appointment and forwards the core contract to it.

    The decorator owns no observer list and no status: ``attach``,
    ``detach`` and ``change_status`` act on the wrapped object, and
    ``status`` is read through. ``patient_name`` and ``schedule`` are
    copied at construction time.

    Subclasses set ``suffix`` to tag ``describe()`` and add their own
    delivery operation.
    """

    suffix: str = ""

    def __init__(self, wrapped: BookableAppointment) -> None:
        self._wrapped = wrapped
        self.patient_name = wrapped.patient_name
        self.schedule = wrapped.schedule

    @property
    def wrapped(self) -> BookableAppointment:
        return self._wrapped

    @property
    def status(self) -> str:
        return self._wrapped.status

    def attach(self, observer: Observer) -> None:
        self._wrapped.attach(observer)

    def detach(self, observer: Observer) -> None:
        self._wrapped.detach(observer)

    def change_status(self, new_status: str) -> None:
        self._wrapped.change_status(new_status)

    def describe(self) -> str:
        description = self._wrapped.describe()
        if self.suffix:
            return f"{description} {self.suffix}"
        return description


class SmsNotification(AppointmentDecorator):
    """Adds SMS delivery to an appointment."""

    suffix = "+ SMS notification"

    def send_sms(self, message: str) -> None:
        logger.debug("Delivering SMS to {}", self._wrapped.patient_name)
        print(f"[SMS to {self._wrapped.patient_name}]: {message}")


class EmailReminder(AppointmentDecorator):
    """Adds email reminders to an appointment."""

    suffix = "+ Email reminder"

    def send_email(self, message: str) -> None:
        logger.debug("Delivering email to {}", self._wrapped.patient_name)
        print(f"[Email to {self._wrapped.patient_name}]: {message}")


def find_decorator(appointment: BookableAppointment, decorator_type: type[D]) -> D | None:
    """Return the outermost layer of ``decorator_type`` in a decorator chain.

    Lets callers reach a delivery operation such as ``send_email`` on an
    appointment that has been passed around as a ``BookableAppointment``,
    even when other decorators are stacked on top of it.
    """
    current: BookableAppointment | None = appointment
    while isinstance(current, AppointmentDecorator):
        if isinstance(current, decorator_type):
            return current
        current = current.wrapped
    return None
