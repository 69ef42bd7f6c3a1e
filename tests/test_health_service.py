from datetime import date

import pytest

from models.patient import Patient, Prescription
from services.health_service import HealthSystem


@pytest.fixture
def health():
    h = HealthSystem()
    h.seed_data()
    h.build_prescription_map()
    return h


def test_prescriptions_grouped_by_patient(health):
    meds = [p.medication_name for p in health.get_prescriptions_by_patient_id(1)]
    assert meds == ["Ibuprofen", "Amoxicillin"]
    assert len(health.get_prescriptions_by_patient_id(3)) == 1


def test_unknown_patient_has_no_prescriptions(health):
    assert health.get_prescriptions_by_patient_id(99) == []


def test_returned_list_is_a_copy(health):
    health.get_prescriptions_by_patient_id(1).clear()
    assert len(health.get_prescriptions_by_patient_id(1)) == 2


def test_map_rebuild_picks_up_new_prescriptions(health):
    health.prescriptions.add_item(Prescription(6, 3, "Aspirin", date(2023, 3, 1)))
    assert len(health.get_prescriptions_by_patient_id(3)) == 1
    health.build_prescription_map()
    assert len(health.get_prescriptions_by_patient_id(3)) == 2


def test_format_patients(health):
    text = health.format_patients()
    assert text.startswith("=== All Patients ===")
    assert "[Patient 2] Jane Smith, 28yrs (Female)" in text


def test_format_prescriptions_for_patient(health):
    text = health.format_prescriptions_for_patient(1)
    assert text.splitlines() == [
        "=== Prescriptions for John Doe ===",
        "[Prescription 1] Ibuprofen (Issued: 2023-01-15)",
        "[Prescription 2] Amoxicillin (Issued: 2023-02-01)",
    ]


def test_format_prescriptions_unknown_patient(health):
    assert health.format_prescriptions_for_patient(42) == "Patient with ID 42 not found."


def test_format_prescriptions_none_on_file(health):
    health.patients.add_item(Patient(4, "Ann Lee", 50, "Female"))
    assert health.format_prescriptions_for_patient(4).endswith("No prescriptions found.")
