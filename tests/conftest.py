import pytest

from booking.config import DemoConfig
from booking.domain.models import GeneralAppointment, SpecialistAppointment
from booking.notifications.fake import RecordingObserver


@pytest.fixture
def general() -> GeneralAppointment:
    return GeneralAppointment(patient_name="Ana Ruiz", schedule="2025-01-01 10:00")


@pytest.fixture
def specialist() -> SpecialistAppointment:
    return SpecialistAppointment(
        patient_name="Roberto Cruz", schedule="2025-11-21 15:30", specialty="Cardiology"
    )


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def demo_config(monkeypatch: pytest.MonkeyPatch) -> DemoConfig:
    for field in DemoConfig.model_fields:
        monkeypatch.delenv(f"BOOKING_{field.upper()}", raising=False)
    return DemoConfig(_env_file=None)  # type: ignore[call-arg]
