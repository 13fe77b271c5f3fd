# This project was developed with assistance from AI tools.
"""Static registry of bidding checklist items.

The catalog and the ``company_checklist`` table are co-designed: every item's
``field`` is a column on ``CompanyChecklist``. Boolean items gate applications
(``required=True``); text items carry companion values and are informational.

The critical-field list is curated by hand and is deliberately independent of
the ``required`` flag.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from db.enums import InputType, Jurisdiction


@dataclass(frozen=True)
class ChecklistItem:
    """A single compliance or document requirement."""

    id: str
    label: str
    category: Jurisdiction
    field: str
    input_type: InputType
    required: bool = True
    description: str = ""
    placeholder: str = ""


def _flag(field: str, label: str, category: Jurisdiction, description: str) -> ChecklistItem:
    return ChecklistItem(
        id=field,
        label=label,
        category=category,
        field=field,
        input_type=InputType.BOOLEAN,
        description=description,
    )


def _text(
    field: str, label: str, category: Jurisdiction, description: str, placeholder: str
) -> ChecklistItem:
    return ChecklistItem(
        id=field,
        label=label,
        category=category,
        field=field,
        input_type=InputType.TEXT,
        required=False,
        description=description,
        placeholder=placeholder,
    )


_STATE = Jurisdiction.STATE
_COUNTY = Jurisdiction.COUNTY
_CITY = Jurisdiction.CITY
_ALL = Jurisdiction.ALL

_INSURANCE = "General liability and other required insurance certificates"
_FINANCIALS = "Audited financial statements for the past 2-3 years"
_REFERENCES = "Client references and past performance documentation"
_CAPABILITY = "Company capability statement and qualifications"
_RESUMES = "Resumes and qualifications of key personnel"
_CERTIFICATIONS = "Small Business, Disabled Veteran, Disadvantaged Business certifications"
_SELLERS_PERMIT = "California Seller's Permit for sales tax collection"
_EIN = "Federal Employer Identification Number"

CHECKLIST_ITEMS: tuple[ChecklistItem, ...] = (
    # -- State --
    _flag("business_license_state", "Business License", _STATE,
          "State business license registration"),
    _text("business_license_number_state", "Business License Number", _STATE,
          "Enter your state business license number", "e.g., BL-123456789"),
    _flag("secretary_of_state_registration_state", "Secretary of State Registration", _STATE,
          "State business registration with Secretary of State"),
    _text("secretary_of_state_number_state", "Secretary of State Number", _STATE,
          "Enter your Secretary of State registration number", "e.g., 123456789"),
    _flag("federal_ein_state", "Federal EIN (Tax ID)", _STATE, _EIN),
    _text("federal_ein_value_state", "Federal EIN Number", _STATE,
          "Enter your Federal EIN (Tax ID) number", "e.g., 12-3456789"),
    _flag("ca_sellers_permit_state", "CA Seller's Permit (if applicable)", _STATE, _SELLERS_PERMIT),
    _flag("insurance_certificates_state", "Insurance Certificates", _STATE, _INSURANCE),
    _flag("financial_statements_state", "Financial Statements (2-3 years)", _STATE, _FINANCIALS),
    _flag("references_past_performance_state", "References / Past Performance", _STATE,
          _REFERENCES),
    _flag("capability_statement_state", "Capability Statement", _STATE, _CAPABILITY),
    _flag("resumes_key_staff_state", "Resumes of Key Staff", _STATE, _RESUMES),
    _flag("certifications_sb_dvbe_dbe_state", "Certifications (SB, DVBE, DBE, etc.)", _STATE,
          _CERTIFICATIONS),
    _text("certification_numbers_state", "Certification Numbers", _STATE,
          "Enter your certification numbers (SB, DVBE, DBE, etc.)",
          "e.g., SB-123456, DVBE-789012"),
    _flag("cal_eprocure_registration", "Cal eProcure Registration", _STATE,
          "California eProcure system registration"),
    _text("cal_eprocure_number", "Cal eProcure Number", _STATE,
          "Enter your Cal eProcure registration number", "e.g., EP-123456789"),
    _flag("payee_data_record_std_204", "Payee Data Record (STD 204)", _STATE,
          "California Payee Data Record form"),
    _flag("darfur_contracting_act_certification_std_843",
          "Darfur Contracting Act Certification (STD 843)", _STATE,
          "Certification regarding Sudan and Darfur contracting"),
    _flag("contractor_certification_clauses_ccc_04",
          "Contractor Certification Clauses (CCC-04 or latest)", _STATE,
          "Contractor certification clauses compliance"),
    _flag("bidder_declaration_form_gspd_05_105", "Bidder Declaration Form (GSPD-05-105)", _STATE,
          "General Services bidder declaration form"),
    _flag("civil_rights_compliance_certification", "Civil Rights Compliance Certification",
          _STATE, "Civil rights compliance certification"),
    # -- County --
    _flag("business_license_county", "Business License", _COUNTY,
          "County business license registration"),
    _flag("secretary_of_state_registration_county", "Secretary of State Registration", _COUNTY,
          "County business registration"),
    _flag("federal_ein_county", "Federal EIN (Tax ID)", _COUNTY, _EIN),
    _flag("ca_sellers_permit_county", "CA Seller's Permit (if applicable)", _COUNTY,
          _SELLERS_PERMIT),
    _flag("insurance_certificates_county", "Insurance Certificates", _COUNTY, _INSURANCE),
    _flag("financial_statements_county", "Financial Statements (2-3 years)", _COUNTY, _FINANCIALS),
    _flag("references_past_performance_county", "References / Past Performance", _COUNTY,
          _REFERENCES),
    _flag("capability_statement_county", "Capability Statement", _COUNTY, _CAPABILITY),
    _flag("resumes_key_staff_county", "Resumes of Key Staff", _COUNTY, _RESUMES),
    _flag("certifications_sb_dvbe_dbe_county", "Certifications (SB, DVBE, DBE, etc.)", _COUNTY,
          _CERTIFICATIONS),
    _flag("county_vendor_registration", "County Vendor Registration", _COUNTY,
          "County vendor registration system enrollment"),
    _flag("w9_county_payee_form", "W-9 or County Payee Form", _COUNTY,
          "W-9 form or county-specific payee information form"),
    _flag("insurance_certificates_naming_county", "Insurance Certificates (naming county)",
          _COUNTY, "Insurance certificates with county as additional insured"),
    _flag("debarment_suspension_certification_county", "Debarment / Suspension Certification",
          _COUNTY, "Certification of no debarment or suspension"),
    _flag("conflict_of_interest_statement_county", "Conflict of Interest Statement", _COUNTY,
          "Conflict of interest disclosure statement"),
    _flag("non_collusion_declaration_county", "Non-Collusion Declaration", _COUNTY,
          "Declaration of no collusion in bidding"),
    _flag("technical_proposal_pricing_sheet_county", "Technical Proposal / Pricing Sheet",
          _COUNTY, "Technical proposal and pricing documentation"),
    # -- City --
    _flag("business_license_city", "Business License", _CITY,
          "City business license registration"),
    _flag("secretary_of_state_registration_city", "Secretary of State Registration", _CITY,
          "City business registration"),
    _flag("federal_ein_city", "Federal EIN (Tax ID)", _CITY, _EIN),
    _flag("ca_sellers_permit_city", "CA Seller's Permit (if applicable)", _CITY, _SELLERS_PERMIT),
    _flag("insurance_certificates_city", "Insurance Certificates", _CITY, _INSURANCE),
    _flag("financial_statements_city", "Financial Statements (2-3 years)", _CITY, _FINANCIALS),
    _flag("references_past_performance_city", "References / Past Performance", _CITY,
          _REFERENCES),
    _flag("capability_statement_city", "Capability Statement", _CITY, _CAPABILITY),
    _flag("resumes_key_staff_city", "Resumes of Key Staff", _CITY, _RESUMES),
    _flag("certifications_sb_dvbe_dbe_city", "Certifications (SB, DVBE, DBE, etc.)", _CITY,
          _CERTIFICATIONS),
    _flag("city_vendor_registration", "City Vendor Registration", _CITY,
          "City vendor registration system enrollment"),
    _flag("w9_form_city", "W-9 Form", _CITY, "W-9 form for tax identification"),
    _flag("insurance_certificates_naming_city", "Insurance Certificates (naming city)", _CITY,
          "Insurance certificates with city as additional insured"),
    _flag("city_business_license", "City Business License", _CITY,
          "City-specific business license"),
    _flag("non_collusion_affidavit_city", "Non-Collusion Affidavit", _CITY,
          "Non-collusion affidavit for city contracts"),
    _flag("subcontractor_list_construction_city", "Subcontractor List (if construction)", _CITY,
          "List of subcontractors for construction projects"),
    _flag("eeo_certification_city", "EEO Certification", _CITY,
          "Equal Employment Opportunity certification"),
    _flag("signed_addenda_acknowledgments_city", "Signed Addenda Acknowledgments", _CITY,
          "Signed acknowledgments of all addenda"),
    _flag("pricing_sheet_cost_proposal_city", "Pricing Sheet / Cost Proposal", _CITY,
          "Detailed pricing sheet and cost proposal"),
    # -- All jurisdictions --
    _flag("legal_business_name_dba", "Legal Business Name + DBA(s)", _ALL,
          "Legal business name and any doing business as names"),
    _text("legal_business_name_value", "Legal Business Name", _ALL,
          "Enter your legal business name and any DBA names",
          "e.g., ABC Corporation dba ABC Services"),
    _flag("duns_uei_number", "DUNS / UEI Number", _ALL,
          "DUNS number or Unique Entity Identifier (if federal funds)"),
    _text("duns_uei_value", "DUNS / UEI Number Value", _ALL,
          "Enter your DUNS or UEI number", "e.g., 123456789"),
    _flag("naics_unspsc_codes", "NAICS / UNSPSC Codes", _ALL,
          "North American Industry Classification System and UNSPSC codes"),
    _flag("sam_gov_registration", "SAM.gov Registration", _ALL,
          "System for Award Management registration (if federal funds)"),
    _flag("bonding_capacity_construction", "Bonding Capacity (if construction)", _ALL,
          "Surety bonding capacity for construction projects"),
    _flag("project_approach_technical_proposal", "Project Approach / Technical Proposal", _ALL,
          "Project approach methodology and technical proposal"),
    _flag("key_personnel_availability", "Key Personnel Availability", _ALL,
          "Availability and commitment of key personnel"),
    _flag("pricing_justification_cost_breakdown", "Pricing Justification / Cost Breakdown", _ALL,
          "Detailed pricing justification and cost breakdown"),
)

# Non-negotiable for any serious bid regardless of overall completion.
CRITICAL_ITEM_FIELDS: tuple[str, ...] = (
    "business_license_state",
    "business_license_county",
    "business_license_city",
    "federal_ein_state",
    "federal_ein_county",
    "federal_ein_city",
    "insurance_certificates_state",
    "insurance_certificates_county",
    "insurance_certificates_city",
    "financial_statements_state",
    "financial_statements_county",
    "financial_statements_city",
    "legal_business_name_dba",
    "duns_uei_number",
    "naics_unspsc_codes",
)


class ChecklistCatalog:
    """Read-only view over a fixed set of checklist items."""

    def __init__(
        self,
        items: Iterable[ChecklistItem],
        critical_fields: Iterable[str] = (),
    ):
        self._items = tuple(items)
        self._critical_fields = tuple(critical_fields)
        self._by_field = {item.field: item for item in self._items}

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    @property
    def items(self) -> tuple[ChecklistItem, ...]:
        return self._items

    def items_for_jurisdiction(self, jurisdiction: Jurisdiction) -> list[ChecklistItem]:
        """Every item tagged with ``jurisdiction``, in catalog order."""
        return [item for item in self._items if item.category == jurisdiction]

    def critical_item_fields(self) -> list[str]:
        return list(self._critical_fields)

    def item_for_field(self, field: str) -> ChecklistItem | None:
        return self._by_field.get(field)

    def fields(self) -> list[str]:
        return [item.field for item in self._items]

    def categories(self) -> dict[Jurisdiction, list[ChecklistItem]]:
        """Items grouped by jurisdiction in display order."""
        return {j: self.items_for_jurisdiction(j) for j in Jurisdiction.ordered()}


CATALOG = ChecklistCatalog(CHECKLIST_ITEMS, CRITICAL_ITEM_FIELDS)
