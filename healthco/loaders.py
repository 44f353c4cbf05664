"""Sources of patient records: a simulated database, a text file, or several combined."""

from __future__ import annotations

import re
import sys
from abc import ABC, abstractmethod
from datetime import date
from pathlib import Path

from healthco.patient import Diagnosis, Patient
from healthco.vitals import Vitals

_LEADING_INT = re.compile(r"\s*[+-]?\d+")
_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class PatientLoader(ABC):
    """A source of patient records."""

    @abstractmethod
    def initialise_connection(self) -> None:
        """Open the connection to the underlying store."""

    @abstractmethod
    def load_patients(self) -> list[Patient]:
        """Return the patients held by the store."""

    @abstractmethod
    def close_connection(self) -> None:
        """Close the connection to the underlying store."""


class CompositePatientLoader(PatientLoader):
    """Runs several loaders in the order they were added."""

    def __init__(self) -> None:
        self._loaders: list[PatientLoader] = []

    def add_loader(self, loader: PatientLoader) -> None:
        self._loaders.append(loader)

    def initialise_connection(self) -> None:
        for loader in self._loaders:
            loader.initialise_connection()

    def load_patients(self) -> list[Patient]:
        return [patient for loader in self._loaders for patient in loader.load_patients()]

    def close_connection(self) -> None:
        for loader in self._loaders:
            loader.close_connection()


class PatientDatabaseLoader(PatientLoader):
    """A simulated database that always holds the same single patient."""

    def initialise_connection(self) -> None:
        pass

    def load_patients(self) -> list[Patient]:
        patient = Patient("Joe", "Bloggs", date(1980, 2, 18))
        patient.add_diagnosis(Diagnosis.CORDYCEPS_BRAIN_INFECTION)
        patient.add_vitals(Vitals(37.5, 80, 60, 16))
        return [patient]

    def close_connection(self) -> None:
        pass


class PatientFileLoader(PatientLoader):
    """Reads patients from a pipe-separated text file, one patient per line."""

    def __init__(self, path: str | Path = "patients.txt") -> None:
        self.path = Path(path)

    def initialise_connection(self) -> None:
        print("Initialising file connection (stub)")

    def load_patients(self) -> list[Patient]:
        return self.load_patient_file(self.path)

    def close_connection(self) -> None:
        print("Closing file connection (stub)")

    def load_patient_file(self, path: str | Path) -> list[Patient]:
        """Parse every non-blank line of the file; an unreadable file gives no patients."""
        try:
            with open(path, encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except OSError:
            print(f"Could not open file: {path}", file=sys.stderr)
            return []
        return [parse_patient_line(line) for line in lines if line.strip()]


def _fields(text: str, separator: str) -> list[str]:
    """Split like repeated getline: a trailing empty field is not produced."""
    parts = text.split(separator)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group())


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group())


def _parse_vitals(entry: str) -> Vitals:
    values = _fields(entry, ",")[:4]
    temperature = _leading_float(values[0]) if values else 0.0
    ints = [_leading_int(value) for value in values[1:]]
    ints += [0] * (3 - len(ints))
    return Vitals(temperature, *ints)


def parse_patient_line(line: str) -> Patient:
    """Build a patient from 'uid|Last,First|dd-mm-yyyy|diagnosis|bt,bp,hr,rr;...'."""
    fields = line.rstrip("\r\n").split("|", 4)
    fields += [""] * (5 - len(fields))
    _, full_name, birth_text, diagnosis, vitals_text = fields

    last_name, _, first_name = full_name.partition(",")

    parts = [_leading_int(token) for token in _fields(birth_text, "-")[:3]]
    parts += [0] * (3 - len(parts))
    day, month, year = parts
    birthday = date(year, month, day)

    patient = Patient(first_name, last_name, birthday)
    patient.add_diagnosis(diagnosis)
    for entry in _fields(vitals_text, ";"):
        patient.add_vitals(_parse_vitals(entry))
    return patient