from booking.domain.ports import BookableAppointment


class ObservedByPatient:
    """Tells the patient about the new status of their appointment."""

    def notify(self, subject: BookableAppointment) -> None:
        print(f"(Patient) {subject.patient_name}, your appointment is now: {subject.status}")


class ObservedByReception:
    """Keeps the front desk's records in step with status changes."""

    def notify(self, subject: BookableAppointment) -> None:
        print(f"(Reception) Update record: {subject.patient_name} -> {subject.status}")
