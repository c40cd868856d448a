from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict

from booking.domain.models import Appointment, GeneralAppointment, SpecialistAppointment


class AppointmentCreator(BaseModel, ABC):
    """Factory Method base: holds the booking data, builds the appointment."""

    model_config = ConfigDict(frozen=True)

    patient_name: str
    schedule: str

    @abstractmethod
    def create_appointment(self) -> Appointment:
        """Return a newly constructed appointment on every call."""


class GeneralCreator(AppointmentCreator):
    def create_appointment(self) -> GeneralAppointment:
        return GeneralAppointment(patient_name=self.patient_name, schedule=self.schedule)


class SpecialistCreator(AppointmentCreator):
    specialty: str

    def create_appointment(self) -> SpecialistAppointment:
        return SpecialistAppointment(
            patient_name=self.patient_name,
            schedule=self.schedule,
            specialty=self.specialty,
        )
