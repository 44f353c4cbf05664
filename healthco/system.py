"""The interactive patient management console."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from contextlib import redirect_stdout
from typing import TextIO

from healthco.loaders import (
    CompositePatientLoader,
    PatientDatabaseLoader,
    PatientFileLoader,
    PatientLoader,
)
from healthco.notifications import (
    GPNotificationSystem,
    GPObserver,
    HospitalAlertSystem,
    HospitalObserver,
)
from healthco.patient import Patient
from healthco.vitals import Vitals


class PatientManagementSystem:
    """Loads patients, lists them and records new vitals from console input."""

    def __init__(
        self,
        loader: PatientLoader | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.loader = loader if loader is not None else PatientFileLoader()
        self.patients: list[Patient] = []
        self.patient_lookup: dict[str, Patient] = {}
        self.hospital_system = HospitalAlertSystem()
        self.gp_system = GPNotificationSystem()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens = self._token_stream()

    def __enter__(self) -> PatientManagementSystem:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _token_stream(self) -> Iterator[str]:
        for line in self._in:
            yield from line.split()

    def _next_token(self) -> str | None:
        return next(self._tokens, None)

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def init(self) -> None:
        """Load the patients, index them by uid and attach the alert observers."""
        self.patients.extend(self.loader.load_patients())
        for patient in self.patients:
            self.patient_lookup[patient.uid] = patient
        for patient in self.patients:
            patient.attach_observer(HospitalObserver(self.hospital_system))
            patient.attach_observer(GPObserver(self.gp_system))

    def run(self) -> None:
        """Show the menu until the user quits or input runs out."""
        self.print_welcome_message()
        while True:
            self.print_main_menu()
            token = self._next_token()
            if token is None:
                return
            try:
                option = int(token)
            except ValueError:
                continue
            if option == 1:
                self.print_patients()
            elif option == 2:
                self.add_vitals_record()
            elif option == 3:
                return

    def add_vitals_record(self) -> None:
        """Ask for a patient and their vitals, then record them."""
        self._write("Patients")
        self.print_patients()
        self._write()
        self._write("Enter the patient ID to declare vitals for > ", end="")

        pid = self._next_token()
        if pid is None:
            return
        patient = self.patient_lookup.get(pid)
        if patient is None:
            self._write("Patient not found")
            return

        prompts = (
            ("enter body temperature: ", float),
            ("enter blood pressure: ", int),
            ("enter heart rate: ", int),
            ("enter respitory rate: ", int),
        )
        values: list[float | int] = []
        for prompt, kind in prompts:
            self._write(prompt, end="")
            token = self._next_token()
            if token is None:
                return
            try:
                values.append(kind(token))
            except ValueError:
                self._write()
                self._write("Invalid vitals")
                return

        with redirect_stdout(self._out):
            patient.add_vitals(Vitals(*values))

    def print_welcome_message(self) -> None:
        self._write("WELCOME TO HEALTHCO 3000")
        self._write("------------------------")

    def print_main_menu(self) -> None:
        self._write()
        self._write("Select an option:")
        self._write("1. List patients")
        self._write("2. Add vitals record")
        self._write("3. Quit")
        self._write("> ", end="")

    def print_patients(self) -> None:
        for patient in self.patients:
            self._write(str(patient))

    def close(self) -> None:
        """Close the loader's connection."""
        self.loader.close_connection()


def main(argv: list[str] | None = None) -> int:
    """Run the console with the database loader followed by the file loader."""
    parser = argparse.ArgumentParser(prog="healthco", description="Patient management console.")
    parser.add_argument("patients_file", nargs="?", default="patients.txt")
    args = parser.parse_args(argv)

    loader = CompositePatientLoader()
    loader.add_loader(PatientDatabaseLoader())
    loader.add_loader(PatientFileLoader(args.patients_file))

    with PatientManagementSystem(loader) as system:
        system.init()
        system.run()
    return 0