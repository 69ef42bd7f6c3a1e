# models/patient.py
from dataclasses import dataclass
from datetime import date
# Patient and prescription models for the health care lookup.

@dataclass(frozen=True)
class Patient:
    id: int
    name: str
    age: int
    gender: str

    def __str__(self) -> str:
        return f"[Patient {self.id}] {self.name}, {self.age}yrs ({self.gender})"


@dataclass(frozen=True)
class Prescription:
    id: int
    patient_id: int
    medication_name: str
    date_issued: date

    def __str__(self) -> str:
        return f"[Prescription {self.id}] {self.medication_name} (Issued: {self.date_issued:%Y-%m-%d})"
