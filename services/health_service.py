"""
health_service.py

Patient and prescription lookup.

Patients and prescriptions live in their own KeyedEntityStore. Lookups by
patient go through an index (patient_id -> prescriptions) that is rebuilt
from the prescription store with build_prescription_map(); call it again
after adding prescriptions.
"""

from datetime import date
from typing import Dict, List

from data.store import KeyedEntityStore
from models.patient import Patient, Prescription


class HealthSystem:
    def __init__(self):
        self.patients: KeyedEntityStore[Patient] = KeyedEntityStore()
        self.prescriptions: KeyedEntityStore[Prescription] = KeyedEntityStore()
        self._prescription_map: Dict[int, List[Prescription]] = {}

    def seed_data(self) -> None:
        self.patients.add_item(Patient(1, "John Doe", 35, "Male"))
        self.patients.add_item(Patient(2, "Jane Smith", 28, "Female"))
        self.patients.add_item(Patient(3, "Robert Johnson", 42, "Male"))

        self.prescriptions.add_item(Prescription(1, 1, "Ibuprofen", date(2023, 1, 15)))
        self.prescriptions.add_item(Prescription(2, 1, "Amoxicillin", date(2023, 2, 1)))
        self.prescriptions.add_item(Prescription(3, 2, "Lisinopril", date(2023, 1, 20)))
        self.prescriptions.add_item(Prescription(4, 2, "Metformin", date(2023, 2, 5)))
        self.prescriptions.add_item(Prescription(5, 3, "Atorvastatin", date(2023, 1, 10)))

    def build_prescription_map(self) -> None:
        self._prescription_map.clear()
        for prescription in self.prescriptions.get_all_items():
            self._prescription_map.setdefault(prescription.patient_id, []).append(prescription)

    def get_prescriptions_by_patient_id(self, patient_id: int) -> List[Prescription]:
        return list(self._prescription_map.get(patient_id, []))

    def format_patients(self) -> str:
        lines = ["=== All Patients ==="]
        lines.extend(str(p) for p in self.patients.get_all_items())
        return "\n".join(lines) + "\n"

    def format_prescriptions_for_patient(self, patient_id: int) -> str:
        if patient_id not in self.patients:
            return f"Patient with ID {patient_id} not found."

        patient = self.patients.get_item_by_id(patient_id)
        lines = [f"=== Prescriptions for {patient.name} ==="]
        prescriptions = self.get_prescriptions_by_patient_id(patient_id)
        if not prescriptions:
            lines.append("No prescriptions found.")
        else:
            lines.extend(str(p) for p in prescriptions)
        return "\n".join(lines)
