import os
import sys
import django

# --- Fix project path ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(os.path.join(BASE_DIR, "backend"))

# --- Set Django settings ---
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "hrms_backend.settings.dev")
django.setup()

from django.contrib.auth import get_user_model
from hr import services
from hr.models import Employee, Team
from identity.services import register_organisation
from platformapp.models import Organisation

User = get_user_model()

DEMO_ORG = "Demo Organisation"
DEMO_EMAIL = "admin@demo.local"
DEMO_PASSWORD = "demo-password"


def seed_demo():
    if Organisation.objects.filter(name=DEMO_ORG).exists():
        org = Organisation.objects.get(name=DEMO_ORG)
        admin = User.objects.get(email=DEMO_EMAIL)
    else:
        session = register_organisation(
            org_name=DEMO_ORG, admin_name="Demo Admin", email=DEMO_EMAIL, password=DEMO_PASSWORD,
        )
        org = Organisation.objects.get(pk=session["organisation"]["id"])
        admin = User.objects.get(pk=session["user"]["id"])

    people = [("Ada", "Lovelace"), ("Grace", "Hopper"), ("Alan", "Turing"), ("Edsger", "Dijkstra")]
    employees = []
    for first, last in people:
        employee, _ = Employee.objects.get_or_create(
            organisation=org,
            email=f"{first.lower()}@demo.local",
            defaults={"first_name": first, "last_name": last},
        )
        employees.append(employee)

    team, _ = Team.objects.get_or_create(
        organisation=org, name="Platform", defaults={"description": "Seeded demo team"},
    )
    services.assign_employees(org.id, admin.id, team.id, [e.id for e in employees[:3]])

    print(f"✅ Seeded {len(employees)} employees and team '{team.name}' for {org.name}")
    print(f"   Login with {DEMO_EMAIL} / {DEMO_PASSWORD}")


if __name__ == "__main__":
    seed_demo()
