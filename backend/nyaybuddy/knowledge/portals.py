from .base import FilingPortal

NATIONAL_CONSUMER_HELPLINE_URL = "https://consumerhelpline.gov.in/"

E_DAAKHIL = FilingPortal(
    name="e-Daakhil",
    url="https://edaakhil.nic.in/",
    steps=[
        "Visit e-Daakhil Portal and register/login",
        "Prepare: ID proof, address proof, purchase receipts, warranty cards",
        "Select your District/State Forum based on claim amount",
        "Fill complaint form with opposite party details and relief sought",
        "Pay filing fee online and submit",
    ],
)
