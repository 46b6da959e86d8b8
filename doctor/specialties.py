MEDICAL_SPECIALTIES = (
    "Alergologia",
    "Anestesiologia",
    "Angiologia",
    "Cardiologia",
    "Cirurgia Geral",
    "Cirurgia Plástica",
    "Clínica Médica",
    "Dermatologia",
    "Endocrinologia",
    "Gastroenterologia",
    "Geriatria",
    "Ginecologia e Obstetrícia",
    "Hematologia",
    "Infectologia",
    "Mastologia",
    "Nefrologia",
    "Neurologia",
    "Nutrologia",
    "Oftalmologia",
    "Oncologia",
    "Ortopedia e Traumatologia",
    "Otorrinolaringologia",
    "Pediatria",
    "Pneumologia",
    "Psiquiatria",
    "Reumatologia",
    "Urologia",
)
