"""A single record of a patient's vital signs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vitals:
    """Body temperature, blood pressure, heart rate and respiratory rate."""

    body_temperature: float
    blood_pressure: int
    heart_rate: int
    respiratory_rate: int

    def __str__(self) -> str:
        return (
            f"{self.body_temperature:g},{self.blood_pressure},"
            f"{self.heart_rate},{self.respiratory_rate}"
        )