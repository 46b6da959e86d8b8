import unittest
import uuid

from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

import models_bootstrap  # noqa: F401
from core.database import Base
from core.errors import field_errors
from clinic.models import Clinic
from patient.models import Patient, PatientSex
from patient import service
from patient.schema import PatientUpsert, UpsertPatientPayload


class PatientServiceTests(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        TestingSession = sessionmaker(bind=self.engine, future=True)
        self.db = TestingSession()

        c1 = Clinic(name="Clinica Um")
        c2 = Clinic(name="Clinica Dois")
        self.db.add_all([c1, c2])
        self.db.flush()
        self.clinic1_id = c1.id
        self.clinic2_id = c2.id

        p1 = Patient(clinic_id=self.clinic1_id, name="Joana", email="joana@example.com",
                     phone_number="11999990000", sex=PatientSex.female)
        p2 = Patient(clinic_id=self.clinic2_id, name="Pedro", email="pedro@example.com",
                     phone_number="11988880000", sex=PatientSex.male)
        self.db.add_all([p1, p2])
        self.db.commit()
        self.clinic1_patient_id = p1.id
        self.clinic2_patient_id = p2.id

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_get_patients_scoped(self):
        rows = service.get_patients(self.db, clinic_id=self.clinic1_id)
        self.assertEqual([r.name for r in rows], ["Joana"])

    def test_upsert_inserts(self):
        dto = PatientUpsert(clinic_id=self.clinic1_id, name="Lucas", email="lucas@example.com",
                            phone_number="11977770000", sex="male")
        patient, created = service.upsert_patient(self.db, dto)
        self.assertTrue(created)
        self.assertEqual(patient.sex, PatientSex.male)
        self.assertEqual(len(service.get_patients(self.db, clinic_id=self.clinic1_id)), 2)

    def test_upsert_updates(self):
        dto = PatientUpsert(id=self.clinic1_patient_id, clinic_id=self.clinic1_id, name="Joana Prado",
                            email="joana@example.com", phone_number="11999990000", sex="female")
        patient, created = service.upsert_patient(self.db, dto)
        self.assertFalse(created)
        self.assertEqual(patient.name, "Joana Prado")

    def test_upsert_other_clinic_is_404(self):
        dto = PatientUpsert(id=self.clinic2_patient_id, clinic_id=self.clinic1_id, name="X",
                            email="x@example.com", phone_number="1", sex="male")
        with self.assertRaises(HTTPException) as ctx:
            service.upsert_patient(self.db, dto)
        self.assertEqual(ctx.exception.status_code, 404)

    def test_delete_patient(self):
        self.assertTrue(service.delete_patient(self.db, self.clinic1_patient_id, clinic_id=self.clinic1_id))
        self.assertFalse(service.delete_patient(self.db, self.clinic2_patient_id, clinic_id=self.clinic1_id))
        self.assertIsNone(service.get_patient(self.db, self.clinic1_patient_id))

    def test_get_patient_for_clinic_unknown_id(self):
        self.assertIsNone(service.get_patient_for_clinic(self.db, uuid.uuid4(), self.clinic1_id))


class UpsertPatientPayloadTests(unittest.TestCase):

    def test_valid_payload_normalizes(self):
        p = UpsertPatientPayload(name=" Joana ", email=" JOANA@Example.com ", phone_number=" 119 ", sex="female")
        self.assertEqual(p.name, "Joana")
        self.assertEqual(p.email, "joana@example.com")
        self.assertEqual(p.phone_number, "119")

    def test_required_messages(self):
        with self.assertRaises(ValidationError) as ctx:
            UpsertPatientPayload(name="", email="", phone_number="", sex="")
        self.assertEqual(
            field_errors(ctx.exception.errors()),
            {
                "name": "O nome é obrigatório",
                "email": "O email é obrigatório",
                "phone_number": "O telefone é obrigatório",
                "sex": "O sexo é obrigatório",
            },
        )

    def test_invalid_email(self):
        with self.assertRaises(ValidationError) as ctx:
            UpsertPatientPayload(name="Joana", email="joana", phone_number="1", sex="female")
        self.assertEqual(field_errors(ctx.exception.errors()), {"email": "Email inválido"})

    def test_length_limits(self):
        with self.assertRaises(ValidationError) as ctx:
            UpsertPatientPayload(name="a" * 256, email="a" * 250 + "@x.com", phone_number="9" * 33, sex="female")
        self.assertEqual(
            field_errors(ctx.exception.errors()),
            {
                "name": "O nome deve ter no máximo 255 caracteres",
                "email": "O email deve ter no máximo 255 caracteres",
                "phone_number": "O telefone deve ter no máximo 32 caracteres",
            },
        )


if __name__ == "__main__":
    unittest.main()
