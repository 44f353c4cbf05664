"""Hospital and GP notification systems and the observers that drive them."""

from __future__ import annotations

from healthco.alerts import AlertLevel
from healthco.patient import AlertObserver, Patient


class HospitalAlertSystem:
    """Mocked hospital pager gateway; alerts on RED patients."""

    def send_alert_for_patient(self, patient: Patient) -> None:
        if patient.alert_level is AlertLevel.RED:
            print()
            print("This is an alert to the hospital:")
            print(f"Patient: {patient.human_readable_id} has a critical alert level")


class GPNotificationSystem:
    """Mocked GP messaging gateway; notifies on levels above ORANGE."""

    def send_gp_notification_for_patient(self, patient: Patient) -> None:
        if patient.alert_level > AlertLevel.ORANGE:
            print()
            print("This is an notification to the GPs:")
            print(f"Patient: {patient.human_readable_id} should be followed up")


class HospitalObserver(AlertObserver):
    """Forwards RED alerts to the hospital system."""

    def __init__(self, hospital_system: HospitalAlertSystem | None) -> None:
        self.hospital_system = hospital_system

    def update(self, patient: Patient) -> None:
        if self.hospital_system is not None:
            self.hospital_system.send_alert_for_patient(patient)


class GPObserver(AlertObserver):
    """Forwards RED alerts to the GP system."""

    def __init__(self, gp_system: GPNotificationSystem | None) -> None:
        self.gp_system = gp_system

    def update(self, patient: Patient) -> None:
        if self.gp_system is not None:
            self.gp_system.send_gp_notification_for_patient(patient)