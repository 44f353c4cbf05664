from datetime import date

import pytest

from healthco.alerts import AlertLevel
from healthco.patient import AlertObserver, Diagnosis, Patient, Person
from healthco.vitals import Vitals


class RecordingObserver(AlertObserver):
    def __init__(self):
        self.seen = []

    def update(self, patient):
        self.seen.append((patient, patient.alert_level))


def make_patient(diagnosis=Diagnosis.CORDYCEPS_BRAIN_INFECTION):
    p = Patient("Joe", "Bloggs", date(1980, 2, 18))
    p.add_diagnosis(diagnosis)
    return p


def test_person_keeps_names():
    person = Person("Ann", "Smith", date(1990, 1, 1))
    assert (person.first_name, person.last_name) == ("Ann", "Smith")


def test_uid_example():
    assert make_patient().uid == "bj0280"


def test_age_is_relative_to_2022():
    assert make_patient().age == 42


def test_human_readable_id():
    p = make_patient()
    assert p.human_readable_id == f"Bloggs, Joe ({p.uid})"


def test_uid_of_empty_name_raises():
    p = Patient("", "Bloggs", date(1980, 2, 18))
    with pytest.raises(IndexError) as excinfo:
        uid = p.uid
        assert uid == ""
    assert excinfo.type is IndexError


def test_primary_diagnosis_is_first():
    p = make_patient(Diagnosis.ANDROMEDA_STRAIN)
    p.add_diagnosis(Diagnosis.KEPRALS_SYNDROME)
    assert p.primary_diagnosis == Diagnosis.ANDROMEDA_STRAIN


def test_primary_diagnosis_without_any_raises():
    with pytest.raises(IndexError):
        Patient("Joe", "Bloggs", date(1980, 2, 18)).primary_diagnosis


def test_str_format():
    p = make_patient()
    v1 = Vitals(37.5, 80, 60, 16)
    v2 = Vitals(38.5, 90, 70, 18)
    p.add_vitals(v1)
    p.add_vitals(v2)
    assert str(p) == (
        f"{p.uid}|Bloggs,Joe|18-02-1980|{Diagnosis.CORDYCEPS_BRAIN_INFECTION}|{v1};{v2}"
    )


def test_str_without_vitals_ends_with_separator():
    p = make_patient()
    assert str(p).endswith(f"|{Diagnosis.CORDYCEPS_BRAIN_INFECTION}|")


def test_vitals_are_kept_in_order():
    p = make_patient()
    records = [Vitals(37.0, 80, 60, r) for r in (10, 12, 14)]
    for r in records:
        p.add_vitals(r)
    assert list(p.vitals) == records


def test_initial_level_is_green():
    assert make_patient().alert_level is AlertLevel.GREEN


def test_add_vitals_computes_level(capsys):
    p = make_patient()
    p.add_vitals(Vitals(37.0, 80, 60, 25))
    assert p.alert_level is AlertLevel.YELLOW
    out = capsys.readouterr().out
    assert out == f"Patient: {p.human_readable_id}has an alert level: Yellow\n"


def test_green_level_prints_nothing(capsys):
    p = make_patient()
    p.add_vitals(Vitals(37.0, 80, 60, 16))
    assert p.alert_level is AlertLevel.GREEN
    assert capsys.readouterr().out == ""


def test_unknown_diagnosis_leaves_level_unchanged(capsys):
    p = make_patient("Common Cold")
    p.add_vitals(Vitals(40.0, 200, 200, 60))
    assert p.alert_level is AlertLevel.GREEN
    assert capsys.readouterr().out == ""


def test_keprals_strategy_selected():
    p = make_patient(Diagnosis.KEPRALS_SYNDROME)
    p.add_vitals(Vitals(37.0, 80, 101, 16))
    assert p.alert_level is AlertLevel.RED


def test_red_notifies_observers():
    p = make_patient(Diagnosis.ANDROMEDA_STRAIN)
    observer = RecordingObserver()
    p.attach_observer(observer)
    p.add_vitals(Vitals(37.0, 135, 60, 16))
    assert observer.seen == []
    p.add_vitals(Vitals(37.0, 150, 60, 16))
    assert observer.seen == [(p, AlertLevel.RED)]


def test_setting_level_directly(capsys):
    p = make_patient()
    observer = RecordingObserver()
    p.attach_observer(observer)
    p.alert_level = AlertLevel.ORANGE
    assert capsys.readouterr().out.endswith("Orange\n")
    p.alert_level = AlertLevel.RED
    assert capsys.readouterr().out.endswith("Red\n")
    assert observer.seen == [(p, AlertLevel.RED)]