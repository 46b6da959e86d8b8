import unittest
import uuid
from types import SimpleNamespace as Obj
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from main import app
from core.database import get_db
from authz.deps import require_clinic

CLINIC_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
PATIENT_ID = uuid.UUID("33333333-3333-3333-3333-333333333333")


def patient_row(**overrides):
    data = dict(id=PATIENT_ID, clinic_id=CLINIC_ID, name="Joana", email="joana@example.com",
                phone_number="11999990000", sex="female")
    data.update(overrides)
    return Obj(**data)


class PatientRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[require_clinic] = lambda: CLINIC_ID
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(require_clinic, None)

    @patch("patient.router.service.get_patients")
    def test_list_patients(self, mock_get):
        mock_get.return_value = [patient_row()]
        resp = self.client.get("/api/patients")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()[0]["sex"], "female")

    @patch("patient.router.service.upsert_patient")
    def test_insert_201(self, mock_upsert):
        mock_upsert.return_value = (patient_row(), True)
        resp = self.client.post("/api/patients", json={
            "name": "Joana", "email": "joana@example.com", "phone_number": "11999990000", "sex": "female",
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        dto = mock_upsert.call_args.args[1]
        self.assertEqual(dto.clinic_id, CLINIC_ID)
        self.assertIsNone(dto.id)

    @patch("patient.router.service.upsert_patient")
    def test_update_200(self, mock_upsert):
        mock_upsert.return_value = (patient_row(name="Joana Prado"), False)
        resp = self.client.post("/api/patients", json={
            "id": str(PATIENT_ID), "name": "Joana Prado", "email": "joana@example.com",
            "phone_number": "11999990000", "sex": "female",
        })
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["name"], "Joana Prado")

    def test_invalid_sex_422(self):
        resp = self.client.post("/api/patients", json={
            "name": "Joana", "email": "joana@example.com", "phone_number": "1", "sex": "other",
        })
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["errors"], {"sex": "O sexo é obrigatório"})

    @patch("patient.router.service.upsert_patient")
    def test_overlong_phone_422(self, mock_upsert):
        resp = self.client.post("/api/patients", json={
            "name": "Joana", "email": "joana@example.com", "phone_number": "9" * 33, "sex": "female",
        })
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["errors"], {"phone_number": "O telefone deve ter no máximo 32 caracteres"})
        mock_upsert.assert_not_called()

    @patch("patient.router.service.upsert_patient")
    def test_persistence_failure_500(self, mock_upsert):
        mock_upsert.side_effect = OperationalError("stmt", "params", Exception("boom"))
        with self.assertLogs("patient.router", level="ERROR"):
            resp = self.client.post("/api/patients", json={
                "name": "Joana", "email": "joana@example.com", "phone_number": "1", "sex": "female",
            })
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json()["detail"], "Erro ao salvar paciente.")

    @patch("patient.router.service.get_patient_for_clinic")
    def test_get_patient_404(self, mock_get):
        mock_get.return_value = None
        resp = self.client.get(f"/api/patients/{PATIENT_ID}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "patient not found")

    @patch("patient.router.service.delete_patient")
    def test_delete_patient_200(self, mock_delete):
        mock_delete.return_value = True
        resp = self.client.delete(f"/api/patients/{PATIENT_ID}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "patient deleted"})

    @patch("patient.router.service.delete_patient")
    def test_delete_patient_404(self, mock_delete):
        mock_delete.return_value = False
        resp = self.client.delete(f"/api/patients/{PATIENT_ID}")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "patient not found")


if __name__ == "__main__":
    unittest.main()
