import unittest
import uuid
from types import SimpleNamespace as Obj
from unittest.mock import patch

from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from authz.deps import get_session_context
from onboarding.schema import ClinicAssociation, SessionContext, SessionUser

CLINIC_ID = uuid.UUID("11111111-1111-1111-1111-111111111111")
USER = SessionUser(id=1, name="Maria Souza", email="maria@example.com")
NO_SESSION = SessionContext()
NO_CLINIC = SessionContext(user=USER)
WITH_CLINIC = SessionContext(user=USER, clinic=ClinicAssociation(clinic_id=CLINIC_ID, clinic_name="Clinica Central"))


class PagesRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        self.client = TestClient(app, follow_redirects=False)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_session_context, None)

    def as_session(self, ctx):
        app.dependency_overrides[get_session_context] = lambda: ctx

    def assertRedirect(self, resp, path):
        self.assertEqual(resp.status_code, 307, resp.text)
        self.assertEqual(resp.headers["location"], f"/api/pages{path}")

    # --- unauthenticated ---

    def test_no_session_redirects_every_protected_page_to_authentication(self):
        self.as_session(NO_SESSION)
        for page in ("dashboard", "doctors", "patients", "appointments", "clinic-form"):
            self.assertRedirect(self.client.get(f"/api/pages/{page}"), "/authentication")

    def test_authentication_page_is_public(self):
        resp = self.client.get("/api/pages/authentication")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["tabs"], ["Login", "Criar Conta"])

    # --- onboarding ---

    def test_no_clinic_dashboard_redirects_to_clinic_form(self):
        self.as_session(NO_CLINIC)
        self.assertRedirect(self.client.get("/api/pages/dashboard"), "/clinic-form")

    def test_no_clinic_gets_clinic_form(self):
        self.as_session(NO_CLINIC)
        resp = self.client.get("/api/pages/clinic-form")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["title"], "Adicionar Clinica")

    def test_clinic_form_redirects_to_dashboard_once_onboarded(self):
        self.as_session(WITH_CLINIC)
        self.assertRedirect(self.client.get("/api/pages/clinic-form"), "/dashboard")

    # --- onboarded ---

    def test_dashboard(self):
        self.as_session(WITH_CLINIC)
        resp = self.client.get("/api/pages/dashboard")
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["user_email"], "maria@example.com")
        self.assertEqual(body["clinic_name"], "Clinica Central")

    @patch("pages.router.doctor_service.get_doctors")
    def test_doctors_page_lists_clinic_doctors(self, mock_get):
        from datetime import time
        mock_get.return_value = [Obj(
            id=uuid.uuid4(), clinic_id=CLINIC_ID, name="Dra. Ana", specialty="Cardiologia",
            avatar_image_url=None, appointment_price_in_cents=15000,
            available_from_weekday=1, available_to_weekday=5,
            available_from_time=time(8, 0), available_to_time=time(18, 0),
        )]
        self.as_session(WITH_CLINIC)
        resp = self.client.get("/api/pages/doctors")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["title"], "Médicos")
        self.assertEqual(resp.json()["doctors"][0]["name"], "Dra. Ana")
        self.assertEqual(mock_get.call_args.kwargs["clinic_id"], CLINIC_ID)

    @patch("pages.router.patient_service.get_patients")
    def test_patients_page(self, mock_get):
        mock_get.return_value = []
        self.as_session(WITH_CLINIC)
        resp = self.client.get("/api/pages/patients")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["patients"], [])

    def test_appointments_page(self):
        self.as_session(WITH_CLINIC)
        resp = self.client.get("/api/pages/appointments")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["page"], "appointments")


if __name__ == "__main__":
    unittest.main()
