# This project was developed with assistance from AI tools.
"""
Company compliance checklist -- domain models

One checklist row per company. Boolean columns are completion flags for a
compliance item at a given tier (state / county / city / universal); text
columns carry the companion license, certificate, or registration values.
The two are independently nullable and never cross-validated.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    false,
    func,
)
from sqlalchemy.orm import relationship

from .database import Base

# Columns that describe the row rather than a checklist item
CHECKLIST_METADATA_COLUMNS = frozenset(
    {"id", "company_id", "last_updated_by", "notes", "created_at", "updated_at"}
)


def _flag():
    return Column(Boolean, nullable=False, default=False, server_default=false())


def _value():
    return Column(Text, nullable=True)


class Company(Base):
    """Contracting company; owns exactly one checklist."""

    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    checklist = relationship(
        "CompanyChecklist", back_populates="company", uselist=False,
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}')>"


class CompanyChecklist(Base):
    """Bidding readiness checklist for a company."""

    __tablename__ = "company_checklist"
    __table_args__ = (
        UniqueConstraint("company_id", name="uq_company_checklist_company_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    company_id = Column(
        Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    last_updated_by = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # -- Items tracked at every tier --
    business_license_state = _flag()
    business_license_county = _flag()
    business_license_city = _flag()
    secretary_of_state_registration_state = _flag()
    secretary_of_state_registration_county = _flag()
    secretary_of_state_registration_city = _flag()
    federal_ein_state = _flag()
    federal_ein_county = _flag()
    federal_ein_city = _flag()
    ca_sellers_permit_state = _flag()
    ca_sellers_permit_county = _flag()
    ca_sellers_permit_city = _flag()
    insurance_certificates_state = _flag()
    insurance_certificates_county = _flag()
    insurance_certificates_city = _flag()
    financial_statements_state = _flag()
    financial_statements_county = _flag()
    financial_statements_city = _flag()
    references_past_performance_state = _flag()
    references_past_performance_county = _flag()
    references_past_performance_city = _flag()
    capability_statement_state = _flag()
    capability_statement_county = _flag()
    capability_statement_city = _flag()
    resumes_key_staff_state = _flag()
    resumes_key_staff_county = _flag()
    resumes_key_staff_city = _flag()
    certifications_sb_dvbe_dbe_state = _flag()
    certifications_sb_dvbe_dbe_county = _flag()
    certifications_sb_dvbe_dbe_city = _flag()

    # -- State-only items --
    cal_eprocure_registration = _flag()
    payee_data_record_std_204 = _flag()
    darfur_contracting_act_certification_std_843 = _flag()
    contractor_certification_clauses_ccc_04 = _flag()
    bidder_declaration_form_gspd_05_105 = _flag()
    civil_rights_compliance_certification = _flag()

    # -- County-only items --
    county_vendor_registration = _flag()
    w9_county_payee_form = _flag()
    insurance_certificates_naming_county = _flag()
    debarment_suspension_certification_county = _flag()
    conflict_of_interest_statement_county = _flag()
    non_collusion_declaration_county = _flag()
    technical_proposal_pricing_sheet_county = _flag()

    # -- City-only items --
    city_vendor_registration = _flag()
    w9_form_city = _flag()
    insurance_certificates_naming_city = _flag()
    city_business_license = _flag()
    non_collusion_affidavit_city = _flag()
    subcontractor_list_construction_city = _flag()
    eeo_certification_city = _flag()
    signed_addenda_acknowledgments_city = _flag()
    pricing_sheet_cost_proposal_city = _flag()

    # -- Universal items --
    legal_business_name_dba = _flag()
    duns_uei_number = _flag()
    naics_unspsc_codes = _flag()
    sam_gov_registration = _flag()
    bonding_capacity_construction = _flag()
    project_approach_technical_proposal = _flag()
    key_personnel_availability = _flag()
    pricing_justification_cost_breakdown = _flag()

    # -- Companion values --
    business_license_number_state = _value()
    business_license_number_county = _value()
    business_license_number_city = _value()
    secretary_of_state_number_state = _value()
    secretary_of_state_number_county = _value()
    secretary_of_state_number_city = _value()
    federal_ein_value_state = _value()
    federal_ein_value_county = _value()
    federal_ein_value_city = _value()
    ca_sellers_permit_number_state = _value()
    ca_sellers_permit_number_county = _value()
    ca_sellers_permit_number_city = _value()
    insurance_certificate_number_state = _value()
    insurance_certificate_number_county = _value()
    insurance_certificate_number_city = _value()
    financial_statements_years_state = _value()
    financial_statements_years_county = _value()
    financial_statements_years_city = _value()
    references_count_state = _value()
    references_count_county = _value()
    references_count_city = _value()
    capability_statement_date_state = _value()
    capability_statement_date_county = _value()
    capability_statement_date_city = _value()
    key_staff_count_state = _value()
    key_staff_count_county = _value()
    key_staff_count_city = _value()
    certification_numbers_state = _value()
    certification_numbers_county = _value()
    certification_numbers_city = _value()

    cal_eprocure_number = _value()
    payee_data_record_number = _value()
    darfur_certification_number = _value()
    contractor_certification_number = _value()
    bidder_declaration_number = _value()
    civil_rights_certification_number = _value()

    county_vendor_number = _value()
    w9_county_number = _value()
    insurance_county_number = _value()
    debarment_certification_number_county = _value()
    conflict_of_interest_number_county = _value()
    non_collusion_number_county = _value()
    technical_proposal_number_county = _value()

    city_vendor_number = _value()
    w9_city_number = _value()
    insurance_city_number = _value()
    city_business_license_number = _value()
    non_collusion_number_city = _value()
    subcontractor_count_city = _value()
    eeo_certification_number_city = _value()
    addenda_count_city = _value()
    pricing_sheet_number_city = _value()

    legal_business_name_value = _value()
    duns_uei_value = _value()
    naics_codes_value = _value()
    sam_gov_number = _value()
    bonding_capacity_value = _value()
    project_approach_date = _value()
    key_personnel_count = _value()
    pricing_justification_date = _value()

    company = relationship("Company", back_populates="checklist")

    @classmethod
    def boolean_fields(cls) -> tuple[str, ...]:
        """Names of the completion-flag columns, in table order."""
        return tuple(
            c.name
            for c in cls.__table__.columns
            if c.name not in CHECKLIST_METADATA_COLUMNS and isinstance(c.type, Boolean)
        )

    @classmethod
    def text_fields(cls) -> tuple[str, ...]:
        """Names of the companion free-text columns, in table order."""
        return tuple(
            c.name
            for c in cls.__table__.columns
            if c.name not in CHECKLIST_METADATA_COLUMNS and isinstance(c.type, Text)
        )

    def to_fields(self) -> dict[str, bool | str | None]:
        """Checklist item values keyed by column name."""
        return {name: getattr(self, name) for name in (*self.boolean_fields(), *self.text_fields())}

    def __repr__(self):
        return f"<CompanyChecklist(id={self.id}, company_id={self.company_id})>"
