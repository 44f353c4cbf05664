# healthco

A small console system for keeping track of patients and their vitals.
Each patient has a primary diagnosis, and every new vitals record is run
through a diagnosis-specific alert rule. When a patient reaches a red alert,
the hospital alert system and the GP notification system are told about it.

## Installing

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
healthco [PATIENTS_FILE]
```

`PATIENTS_FILE` defaults to `patients.txt` in the current directory. The
program loads one simulated database patient (Joe Bloggs) first and then the
patients in the file. If the file cannot be opened, a message is written to
standard error and only the database patient is loaded. It then shows a menu:

```
WELCOME TO HEALTHCO 3000
------------------------

Select an option:
1. List patients
2. Add vitals record
3. Quit
>
```

Choosing 2 lists the patients, asks for a patient ID, and then for body
temperature, blood pressure, heart rate and respiratory rate. An unknown ID
prints `Patient not found`; a value that is not a number prints
`Invalid vitals` and nothing is recorded. Input is read as
whitespace-separated words; a menu choice that is not a whole number is
ignored, and the program ends on option 3 or at the end of input.

## Patient file format

One patient per line, fields separated by `|`; blank lines are skipped:

```
bj021980|Bloggs,Joe|18-02-1980|Cordyceps Brain Infection|37.5,80,60,16;38.1,90,70,25
```

The fields are the patient ID, `Last,First`, the birthday as `dd-mm-yyyy`,
the diagnosis, and an optional `;`-separated list of vitals, each written as
`temperature,blood pressure,heart rate,respiratory rate`. The ID in the file
is not used: a patient's `uid` is built from the initials of the last and
first name, the two-digit birth month and the birth year minus 1900. Vitals
read from the file are run through the alert rules as they are added.
Listing patients prints them in the same form.

## Alert rules

| Diagnosis                  | Measure          | Yellow | Orange | Red                             |
|----------------------------|------------------|--------|--------|---------------------------------|
| Cordyceps Brain Infection  | respiratory rate | > 20   | > 30   | > 40                            |
| Andromeda Strain           | blood pressure   | > 110  | > 130  | > 140                           |
| Kepral’s Syndrome          | heart rate       | –      | –      | > 120 under 12, > 100 otherwise |

A patient's age is estimated as 2022 minus the birth year. Any other
diagnosis raises no alerts. Every level above green is printed; on red the
attached observers are told, and both the hospital system and the GP system
print a message.

## Using it as a library

```python
from datetime import date

from healthco.alerts import AlertLevel
from healthco.patient import Diagnosis, Patient
from healthco.vitals import Vitals
from healthco.notifications import (
    GPNotificationSystem, GPObserver, HospitalAlertSystem, HospitalObserver,
)

patient = Patient("Joe", "Bloggs", date(1980, 2, 18))
patient.add_diagnosis(Diagnosis.CORDYCEPS_BRAIN_INFECTION)
patient.attach_observer(HospitalObserver(HospitalAlertSystem()))
patient.attach_observer(GPObserver(GPNotificationSystem()))

patient.add_vitals(Vitals(37.5, 80, 60, 45))
assert patient.alert_level == AlertLevel.RED
print(patient)  # bj0280|Bloggs,Joe|18-02-1980|Cordyceps Brain Infection|37.5,80,60,45
```

- `healthco.vitals.Vitals` – an immutable vitals record.
- `healthco.alerts` – `AlertLevel` and the strategies `CordycepsStrategy`,
  `AndromedaStrategy` and `KepralsStrategy`, all subclasses of
  `AlertStrategy`.
- `healthco.patient` – `Person`, `Patient`, `Diagnosis` and the
  `AlertObserver` interface.
- `healthco.notifications` – `HospitalAlertSystem`, `GPNotificationSystem`
  and the observers `HospitalObserver` and `GPObserver`.
- `healthco.loaders` – `PatientFileLoader`, `PatientDatabaseLoader`,
  `CompositePatientLoader` (runs several loaders in the order they were
  added) and `parse_patient_line` for a single line of the file format.
- `healthco.system.PatientManagementSystem` – ties a loader to the
  interactive menu; it takes optional `stdin` and `stdout` streams and can be
  used as a context manager, which closes the loader on exit.

## What it does not do

Vitals entered at the menu are kept in memory only: nothing is written back
to the patients file. `PatientDatabaseLoader` does not connect to any
database; it always returns the same single patient. The hospital and GP
systems only print their messages to the console.