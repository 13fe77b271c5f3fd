# This project was developed with assistance from AI tools.
"""Functional tests: company checklist journey across personas.

Owners and admins edit; team members and basic users read. Callers without a
company get 404 everywhere. Errors come back as Problem Details.
"""

import pytest

from tests.factories import make_checklist, make_mock_company

from .mock_db import make_mock_session
from .personas import admin, basic_user, company_owner, stranger, team_member

pytestmark = pytest.mark.functional

BASE = "/api/company/checklist"


def _session(checklist=None, company=True):
    return make_mock_session(
        company=make_mock_company() if company else None,
        checklist=checklist,
    )


class TestReadChecklist:
    def test_get_existing_checklist(self, make_client):
        checklist = make_checklist(completed={"business_license_state"}, notes="hello")
        client = make_client(team_member(), _session(checklist))

        resp = client.get(BASE)

        assert resp.status_code == 200
        data = resp.json()
        assert data["company_id"] == 7
        assert data["fields"]["business_license_state"] is True
        assert data["fields"]["federal_ein_state"] is False
        assert data["fields"]["cal_eprocure_number"] is None
        assert data["notes"] == "hello"

    def test_get_creates_checklist_on_first_access(self, make_client):
        session = _session(checklist=None)
        client = make_client(basic_user(), session)

        resp = client.get(BASE)

        assert resp.status_code == 200
        data = resp.json()
        assert data["id"] == 501
        assert not any(v for v in data["fields"].values())
        session.add.assert_called_once()
        session.commit.assert_awaited()

    def test_no_company_on_token_returns_404(self, make_client):
        client = make_client(stranger(), _session())

        resp = client.get(BASE)

        assert resp.status_code == 404
        assert resp.json()["detail"] == "No company found"

    def test_company_missing_in_db_returns_404(self, make_client):
        client = make_client(company_owner(), _session(company=False))

        resp = client.get(BASE)

        assert resp.status_code == 404


class TestEditChecklist:
    @pytest.mark.parametrize("persona", [company_owner, admin])
    def test_editors_can_put(self, make_client, persona):
        checklist = make_checklist()
        client = make_client(persona(), _session(checklist))

        resp = client.put(BASE, json={"field": "business_license_state", "value": True})

        assert resp.status_code == 200
        data = resp.json()
        assert data["fields"]["business_license_state"] is True
        assert data["last_updated_by"] == persona().user_id

    @pytest.mark.parametrize("persona", [team_member, basic_user])
    def test_readers_cannot_put(self, make_client, persona):
        session = _session(make_checklist())
        client = make_client(persona(), session)

        resp = client.put(BASE, json={"field": "business_license_state", "value": True})

        assert resp.status_code == 403
        assert resp.json()["detail"] == "Insufficient permissions"
        session.commit.assert_not_awaited()

    @pytest.mark.parametrize("persona", [team_member, basic_user])
    def test_readers_cannot_patch(self, make_client, persona):
        client = make_client(persona(), _session(make_checklist()))

        resp = client.patch(BASE, json={"updates": {"w9_form_city": True}})

        assert resp.status_code == 403

    def test_put_text_value(self, make_client):
        client = make_client(company_owner(), _session(make_checklist()))

        resp = client.put(BASE, json={"field": "duns_uei_value", "value": "123456789"})

        assert resp.status_code == 200
        assert resp.json()["fields"]["duns_uei_value"] == "123456789"

    def test_put_unknown_field_is_problem_details_422(self, make_client):
        client = make_client(company_owner(), _session(make_checklist()))

        resp = client.put(
            BASE,
            json={"field": "bogus", "value": True},
            headers={"X-Request-ID": "req-123"},
        )

        assert resp.status_code == 422
        body = resp.json()
        assert body["title"] == "Unprocessable Entity"
        assert body["status"] == 422
        assert "bogus" in body["detail"]
        assert body["request_id"] == "req-123"
        assert body["instance"] == BASE

    def test_put_wrong_value_type_422(self, make_client):
        client = make_client(company_owner(), _session(make_checklist()))

        resp = client.put(BASE, json={"field": "business_license_state", "value": "yes"})

        assert resp.status_code == 422

    def test_put_missing_value_422(self, make_client):
        client = make_client(company_owner(), _session(make_checklist()))

        resp = client.put(BASE, json={"field": "business_license_state"})

        assert resp.status_code == 422
        assert resp.json()["title"] == "Unprocessable Entity"

    def test_patch_applies_booleans_and_notes(self, make_client):
        client = make_client(company_owner(), _session(make_checklist()))

        resp = client.patch(
            BASE,
            json={
                "updates": {
                    "federal_ein_city": True,
                    "insurance_certificates_city": "true",
                },
                "notes": "Filed with the city",
            },
        )

        assert resp.status_code == 200
        data = resp.json()
        assert data["fields"]["federal_ein_city"] is True
        assert data["fields"]["insurance_certificates_city"] is False
        assert data["notes"] == "Filed with the city"

    def test_patch_null_notes_clears_them(self, make_client):
        client = make_client(company_owner(), _session(make_checklist(notes="old")))

        resp = client.patch(BASE, json={"updates": {}, "notes": None})

        assert resp.status_code == 200
        assert resp.json()["notes"] is None

    def test_patch_without_notes_keeps_them(self, make_client):
        client = make_client(company_owner(), _session(make_checklist(notes="old")))

        resp = client.patch(BASE, json={"updates": {"w9_form_city": True}})

        assert resp.status_code == 200
        assert resp.json()["notes"] == "old"

    def test_patch_skips_list_and_object_values(self, make_client):
        client = make_client(company_owner(), _session(make_checklist()))

        resp = client.patch(
            BASE,
            json={"updates": {"w9_form_city": [True], "federal_ein_city": {"v": True}}},
        )

        assert resp.status_code == 200
        assert resp.json()["fields"]["w9_form_city"] is False
        assert resp.json()["fields"]["federal_ein_city"] is False

    @pytest.mark.parametrize("persona", [team_member, basic_user])
    def test_reader_without_company_gets_404_before_403(self, make_client, persona):
        reader = persona().model_copy(update={"company_id": None})
        client = make_client(reader, _session())

        resp = client.patch(BASE, json={"updates": {"w9_form_city": True}})

        assert resp.status_code == 404
        assert resp.json()["detail"] == "No company found"

    def test_patch_unknown_field_422(self, make_client):
        client = make_client(admin(), _session(make_checklist()))

        resp = client.patch(BASE, json={"updates": {"bogus": True}})

        assert resp.status_code == 422

    def test_put_without_company_404(self, make_client):
        client = make_client(stranger(), _session())

        resp = client.put(BASE, json={"field": "business_license_state", "value": True})

        assert resp.status_code == 404


class TestCatalog:
    def test_catalog_grouped_by_jurisdiction(self, make_client):
        client = make_client(basic_user(), _session())

        resp = client.get(f"{BASE}/catalog")

        assert resp.status_code == 200
        data = resp.json()
        assert data["total_items"] == 67
        assert [c["category"] for c in data["categories"]] == ["State", "County", "City", "All"]
        assert len(data["critical_item_fields"]) == 15
        first = data["categories"][0]["items"][0]
        assert first["field"] == "business_license_state"
        assert first["input_type"] == "boolean"


class TestValidationViews:
    def test_validation_single_jurisdiction(self, make_client):
        checklist = make_checklist(completed={"business_license_city", "federal_ein_city"})
        client = make_client(team_member(), _session(checklist))

        resp = client.get(f"{BASE}/validation", params={"jurisdictions": "City"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["jurisdictions"] == ["City"]
        # 2 / 19
        assert data["completion_percentage"] == 11
        assert data["can_apply"] is False
        assert len(data["missing_items"]) == 17
        assert data["recommendations"][0] == "Complete the 17 missing city requirements"

    def test_validation_pooled_across_jurisdictions(self, make_client):
        client = make_client(team_member(), _session(make_checklist()))

        resp = client.get(
            f"{BASE}/validation", params=[("jurisdictions", "State"), ("jurisdictions", "All")]
        )

        assert resp.status_code == 200
        data = resp.json()
        assert len(data["missing_items"]) == 24
        assert data["recommendations"][0] == (
            "You have 24 missing requirements across 2 jurisdictions"
        )

    def test_validation_defaults_to_all_jurisdictions(self, make_client):
        client = make_client(team_member(), _session(make_checklist()))

        resp = client.get(f"{BASE}/validation")

        assert resp.status_code == 200
        assert resp.json()["jurisdictions"] == ["State", "County", "City", "All"]
        assert len(resp.json()["missing_items"]) == 60

    def test_validation_unknown_jurisdiction_422(self, make_client):
        client = make_client(team_member(), _session(make_checklist()))

        resp = client.get(f"{BASE}/validation", params={"jurisdictions": "Federal"})

        assert resp.status_code == 422
        assert resp.json()["status"] == 422

    def test_validation_does_not_create_row(self, make_client):
        session = _session(checklist=None)
        client = make_client(team_member(), session)

        resp = client.get(f"{BASE}/validation", params={"jurisdictions": "All"})

        assert resp.status_code == 200
        assert resp.json()["completion_percentage"] == 0
        session.add.assert_not_called()

    def test_summary(self, make_client):
        checklist = make_checklist(completed={"legal_business_name_dba"})
        client = make_client(basic_user(), _session(checklist))

        resp = client.get(f"{BASE}/summary")

        assert resp.status_code == 200
        data = resp.json()
        assert data["total_items"] == 67
        assert data["completed_items"] == 1
        assert data["by_jurisdiction"] == {"State": 0, "County": 0, "City": 0, "All": 1}
        assert data["critical_items_missing"] == 14

    def test_progress(self, make_client):
        checklist = make_checklist(
            completed={"sam_gov_registration"}, duns_uei_value="123456789"
        )
        client = make_client(basic_user(), _session(checklist))

        resp = client.get(f"{BASE}/progress")

        assert resp.status_code == 200
        data = resp.json()
        assert data["completed"] == 2
        assert data["by_category"]["All"] == 2

    def test_critical(self, make_client):
        client = make_client(basic_user(), _session(make_checklist()))

        resp = client.get(f"{BASE}/critical")

        assert resp.status_code == 200
        assert resp.json()["count"] == 15

    def test_gate_reports_both_signals(self, make_client):
        city = {
            "business_license_city",
            "secretary_of_state_registration_city",
            "ca_sellers_permit_city",
            "insurance_certificates_city",
            "financial_statements_city",
            "references_past_performance_city",
            "capability_statement_city",
            "resumes_key_staff_city",
            "certifications_sb_dvbe_dbe_city",
            "city_vendor_registration",
            "w9_form_city",
            "insurance_certificates_naming_city",
            "city_business_license",
            "non_collusion_affidavit_city",
            "subcontractor_list_construction_city",
            "eeo_certification_city",
            "signed_addenda_acknowledgments_city",
            "pricing_sheet_cost_proposal_city",
        }
        client = make_client(company_owner(), _session(make_checklist(completed=city)))

        resp = client.get(f"{BASE}/gate", params={"jurisdictions": "City"})

        assert resp.status_code == 200
        data = resp.json()
        # 18 / 19, only the federal EIN is missing
        assert data["validation"]["completion_percentage"] == 95
        assert data["validation"]["can_apply"] is True
        assert "Federal EIN (Tax ID)" in data["critical_items_missing"]
        assert data["may_submit"] is False


class TestHealth:
    def test_health_reports_api_and_database(self, make_client):
        from src import __version__

        client = make_client(basic_user(), _session())

        resp = client.get("/health/")

        assert resp.status_code == 200
        data = resp.json()
        assert [item["name"] for item in data] == ["API", "Database"]
        assert data[0]["version"] == __version__
        assert "PostgreSQL" in data[1]["message"]

    def test_root(self, make_client):
        client = make_client(basic_user(), _session())

        resp = client.get("/")

        assert resp.status_code == 200
        assert "BidReady" in resp.json()["message"]
