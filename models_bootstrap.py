# models_bootstrap.py
from user import models as _user_models
from clinic import models as _clinic_models
from doctor import models as _doctor_models
from patient import models as _patient_models
