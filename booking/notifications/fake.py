from collections.abc import Callable

from booking.domain.ports import BookableAppointment


class RecordingObserver:
    """In-memory test double for the Observer protocol.

    Every notification is appended to ``calls`` as a ``(subject, status)``
    pair, with the status read at notification time. Set ``on_notify`` to
    run extra code inside the notification, e.g. to detach or attach other
    observers mid-pass.
    """

    def __init__(self, name: str = "recorder") -> None:
        self.name = name
        self.calls: list[tuple[BookableAppointment, str]] = []
        self.on_notify: Callable[[BookableAppointment], None] | None = None

    def notify(self, subject: BookableAppointment) -> None:
        self.calls.append((subject, subject.status))
        if self.on_notify:
            self.on_notify(subject)

    @property
    def statuses(self) -> list[str]:
        return [status for _, status in self.calls]
