import sys

from loguru import logger

from booking.config import DemoConfig
from booking.domain.models import AppointmentKind
from booking.notifications.decorators import EmailReminder, SmsNotification
from booking.notifications.observers import ObservedByPatient, ObservedByReception
from booking.scheduling.factory import build_creator


def run_demo(config: DemoConfig) -> None:
    """Book two appointments, wire notifications, then confirm and cancel them."""
    print("=== Appointment Booking with Patterns ===")

    general_creator = build_creator(
        AppointmentKind.GENERAL, config.general_patient, config.general_schedule
    )
    specialist_creator = build_creator(
        AppointmentKind.SPECIALIST,
        config.specialist_patient,
        config.specialist_schedule,
        specialty=config.specialty,
    )

    first = general_creator.create_appointment()
    second = specialist_creator.create_appointment()

    patient = ObservedByPatient()
    reception = ObservedByReception()

    first.attach(patient)
    first.attach(reception)

    second.attach(patient)
    second.attach(reception)

    # send_sms / send_email live on the concrete decorator types only.
    first_sms = SmsNotification(first)
    second_email = EmailReminder(second)

    print(first_sms.describe())
    print(second_email.describe())
    print()

    print("-- Confirming the first appointment --")
    first_sms.change_status("confirmed")
    first_sms.send_sms(config.sms_message)

    print()
    print("-- Cancelling the second appointment --")
    second_email.change_status("cancelled")
    second_email.send_email(config.email_message)


def main() -> None:
    """Console entry point."""
    config = DemoConfig()

    logger.remove()
    logger.add(sys.stderr, level=config.log_level)
    logger.info("Starting appointment booking demo")

    run_demo(config)


if __name__ == "__main__":
    main()
