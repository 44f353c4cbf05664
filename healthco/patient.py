"""Patients, their diagnoses, vitals history and alert observers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from healthco.alerts import (
    AlertLevel,
    AlertStrategy,
    AndromedaStrategy,
    CordycepsStrategy,
    KepralsStrategy,
)
from healthco.vitals import Vitals


class Diagnosis:
    """Names of the diseases the system knows about."""

    CORDYCEPS_BRAIN_INFECTION = "Cordyceps Brain Infection"
    KEPRALS_SYNDROME = "Kepral\u2019s Syndrome"
    ANDROMEDA_STRAIN = "Andromeda Strain"


_STRATEGIES: dict[str, type[AlertStrategy]] = {
    Diagnosis.CORDYCEPS_BRAIN_INFECTION: CordycepsStrategy,
    Diagnosis.KEPRALS_SYNDROME: KepralsStrategy,
    Diagnosis.ANDROMEDA_STRAIN: AndromedaStrategy,
}

_LEVEL_NAMES = {
    AlertLevel.YELLOW: "Yellow",
    AlertLevel.ORANGE: "Orange",
    AlertLevel.RED: "Red",
}


class AlertObserver(ABC):
    """Receives a notification when a patient's alert level becomes RED."""

    @abstractmethod
    def update(self, patient: Patient) -> None:
        """Handle a RED alert for the given patient."""


class Person:
    """A named person with a birthday."""

    def __init__(self, first_name: str, last_name: str, birthday: date) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.birthday = birthday


class Patient(Person):
    """A person under care, with diagnoses, vitals and an alert level."""

    def __init__(self, first_name: str, last_name: str, birthday: date) -> None:
        super().__init__(first_name, last_name, birthday)
        self._diagnoses: list[str] = []
        self._vitals: list[Vitals] = []
        self._alert_level = AlertLevel.GREEN
        self._strategy: AlertStrategy | None = None
        self._observers: list[AlertObserver] = []

    @property
    def age(self) -> int:
        """A rough age estimate measured against the year 2022."""
        return 2022 - self.birthday.year

    @property
    def uid(self) -> str:
        """An identifier built from initials, birth month and year; may collide."""
        return (
            f"{self.last_name[0].lower()}{self.first_name[0].lower()}"
            f"{self.birthday.month:02d}{self.birthday.year - 1900}"
        )

    @property
    def human_readable_id(self) -> str:
        return f"{self.last_name}, {self.first_name} ({self.uid})"

    def add_diagnosis(self, diagnosis: str) -> None:
        """Record a diagnosis; the alert strategy follows the primary one."""
        self._diagnoses.append(diagnosis)
        strategy_type = _STRATEGIES.get(self.primary_diagnosis)
        self._strategy = strategy_type() if strategy_type else None

    @property
    def primary_diagnosis(self) -> str:
        """The first diagnosis added; IndexError if there is none."""
        if not self._diagnoses:
            raise IndexError("patient has no diagnosis")
        return self._diagnoses[0]

    def add_vitals(self, vitals: Vitals) -> None:
        """Record vitals and recompute the alert level when a strategy applies."""
        self._vitals.append(vitals)
        if self._strategy is not None:
            self.alert_level = self._strategy.calculate_alert_level(self, vitals)

    @property
    def vitals(self) -> tuple[Vitals, ...]:
        return tuple(self._vitals)

    @property
    def alert_level(self) -> AlertLevel:
        return self._alert_level

    @alert_level.setter
    def alert_level(self, level: AlertLevel) -> None:
        self._alert_level = AlertLevel(level)
        if self._alert_level > AlertLevel.GREEN:
            print(
                f"Patient: {self.human_readable_id}has an alert level: "
                f"{_LEVEL_NAMES[self._alert_level]}",
                end="",
            )
            if self._alert_level is AlertLevel.RED:
                self._notify_observers()
            print()

    def attach_observer(self, observer: AlertObserver) -> None:
        self._observers.append(observer)

    def _notify_observers(self) -> None:
        for observer in self._observers:
            observer.update(self)

    def __str__(self) -> str:
        vitals = ";".join(str(v) for v in self._vitals)
        return (
            f"{self.uid}|{self.last_name},{self.first_name}|"
            f"{self.birthday.strftime('%d-%m-%Y')}|{self.primary_diagnosis}|{vitals}"
        )