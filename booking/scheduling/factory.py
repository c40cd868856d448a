from typing import Callable

from loguru import logger

from booking.domain.exceptions import MissingSpecialtyError, UnknownAppointmentKindError
from booking.domain.models import AppointmentKind
from booking.scheduling.creators import AppointmentCreator, GeneralCreator, SpecialistCreator


def _build_general(patient_name: str, schedule: str, specialty: str | None) -> AppointmentCreator:
    return GeneralCreator(patient_name=patient_name, schedule=schedule)


def _build_specialist(
    patient_name: str, schedule: str, specialty: str | None
) -> AppointmentCreator:
    if specialty is None:
        raise MissingSpecialtyError(patient_name)
    return SpecialistCreator(patient_name=patient_name, schedule=schedule, specialty=specialty)


_BUILDERS: dict[AppointmentKind, Callable[[str, str, str | None], AppointmentCreator]] = {
    AppointmentKind.GENERAL: _build_general,
    AppointmentKind.SPECIALIST: _build_specialist,
}


def build_creator(
    kind: AppointmentKind | str,
    patient_name: str,
    schedule: str,
    specialty: str | None = None,
) -> AppointmentCreator:
    """Build the creator registered for ``kind``.

    Args:
        kind: An ``AppointmentKind`` or its string value.
        patient_name: Name of the patient the appointment is for.
        schedule: Free-form slot description, e.g. ``"2025-11-20 10:00"``.
        specialty: Required for specialist appointments, ignored otherwise.

    Raises:
        UnknownAppointmentKindError: If ``kind`` has no registered creator.
        MissingSpecialtyError: If a specialist creator is requested without
            a specialty.
    """
    try:
        resolved = AppointmentKind(kind)
    except ValueError as exc:
        raise UnknownAppointmentKindError(kind) from exc

    logger.info("Building appointment creator for kind: {}", resolved.value)
    return _BUILDERS[resolved](patient_name, schedule, specialty)
