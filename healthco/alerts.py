"""Alert levels and the disease-specific strategies that compute them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from healthco.patient import Patient
    from healthco.vitals import Vitals


class AlertLevel(IntEnum):
    """Severity of a patient's condition, ordered from least to most severe."""

    GREEN = 0
    YELLOW = 1
    ORANGE = 2
    RED = 3


class AlertStrategy(ABC):
    """Computes an alert level for a patient from their latest vitals."""

    @abstractmethod
    def calculate_alert_level(self, patient: Patient, vitals: Vitals) -> AlertLevel:
        """Return the alert level; GREEN when no disease criteria are met."""


class AndromedaStrategy(AlertStrategy):
    """Alerts on raised blood pressure."""

    def calculate_alert_level(self, patient: Patient, vitals: Vitals) -> AlertLevel:
        bp = vitals.blood_pressure
        if bp > 140:
            return AlertLevel.RED
        if bp > 130:
            return AlertLevel.ORANGE
        if bp > 110:
            return AlertLevel.YELLOW
        return AlertLevel.GREEN


class CordycepsStrategy(AlertStrategy):
    """Alerts on raised respiratory rate."""

    def calculate_alert_level(self, patient: Patient, vitals: Vitals) -> AlertLevel:
        rr = vitals.respiratory_rate
        if rr > 40:
            return AlertLevel.RED
        if rr > 30:
            return AlertLevel.ORANGE
        if rr > 20:
            return AlertLevel.YELLOW
        return AlertLevel.GREEN


class KepralsStrategy(AlertStrategy):
    """Alerts on a heart rate above an age-dependent limit."""

    def calculate_alert_level(self, patient: Patient, vitals: Vitals) -> AlertLevel:
        limit = 120 if patient.age < 12 else 100
        if vitals.heart_rate > limit:
            return AlertLevel.RED
        return AlertLevel.GREEN