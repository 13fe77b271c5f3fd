# This project was developed with assistance from AI tools.
"""add companies and company checklist

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 09:12:41.518230

"""

import sqlalchemy as sa
from alembic import op

revision = "3f1c2a9d7e10"
down_revision = None
branch_labels = None
depends_on = None

_FLAG_COLUMNS = (
    "business_license_state",
    "business_license_county",
    "business_license_city",
    "secretary_of_state_registration_state",
    "secretary_of_state_registration_county",
    "secretary_of_state_registration_city",
    "federal_ein_state",
    "federal_ein_county",
    "federal_ein_city",
    "ca_sellers_permit_state",
    "ca_sellers_permit_county",
    "ca_sellers_permit_city",
    "insurance_certificates_state",
    "insurance_certificates_county",
    "insurance_certificates_city",
    "financial_statements_state",
    "financial_statements_county",
    "financial_statements_city",
    "references_past_performance_state",
    "references_past_performance_county",
    "references_past_performance_city",
    "capability_statement_state",
    "capability_statement_county",
    "capability_statement_city",
    "resumes_key_staff_state",
    "resumes_key_staff_county",
    "resumes_key_staff_city",
    "certifications_sb_dvbe_dbe_state",
    "certifications_sb_dvbe_dbe_county",
    "certifications_sb_dvbe_dbe_city",
    "cal_eprocure_registration",
    "payee_data_record_std_204",
    "darfur_contracting_act_certification_std_843",
    "contractor_certification_clauses_ccc_04",
    "bidder_declaration_form_gspd_05_105",
    "civil_rights_compliance_certification",
    "county_vendor_registration",
    "w9_county_payee_form",
    "insurance_certificates_naming_county",
    "debarment_suspension_certification_county",
    "conflict_of_interest_statement_county",
    "non_collusion_declaration_county",
    "technical_proposal_pricing_sheet_county",
    "city_vendor_registration",
    "w9_form_city",
    "insurance_certificates_naming_city",
    "city_business_license",
    "non_collusion_affidavit_city",
    "subcontractor_list_construction_city",
    "eeo_certification_city",
    "signed_addenda_acknowledgments_city",
    "pricing_sheet_cost_proposal_city",
    "legal_business_name_dba",
    "duns_uei_number",
    "naics_unspsc_codes",
    "sam_gov_registration",
    "bonding_capacity_construction",
    "project_approach_technical_proposal",
    "key_personnel_availability",
    "pricing_justification_cost_breakdown",
)

_VALUE_COLUMNS = (
    "business_license_number_state",
    "business_license_number_county",
    "business_license_number_city",
    "secretary_of_state_number_state",
    "secretary_of_state_number_county",
    "secretary_of_state_number_city",
    "federal_ein_value_state",
    "federal_ein_value_county",
    "federal_ein_value_city",
    "ca_sellers_permit_number_state",
    "ca_sellers_permit_number_county",
    "ca_sellers_permit_number_city",
    "insurance_certificate_number_state",
    "insurance_certificate_number_county",
    "insurance_certificate_number_city",
    "financial_statements_years_state",
    "financial_statements_years_county",
    "financial_statements_years_city",
    "references_count_state",
    "references_count_county",
    "references_count_city",
    "capability_statement_date_state",
    "capability_statement_date_county",
    "capability_statement_date_city",
    "key_staff_count_state",
    "key_staff_count_county",
    "key_staff_count_city",
    "certification_numbers_state",
    "certification_numbers_county",
    "certification_numbers_city",
    "cal_eprocure_number",
    "payee_data_record_number",
    "darfur_certification_number",
    "contractor_certification_number",
    "bidder_declaration_number",
    "civil_rights_certification_number",
    "county_vendor_number",
    "w9_county_number",
    "insurance_county_number",
    "debarment_certification_number_county",
    "conflict_of_interest_number_county",
    "non_collusion_number_county",
    "technical_proposal_number_county",
    "city_vendor_number",
    "w9_city_number",
    "insurance_city_number",
    "city_business_license_number",
    "non_collusion_number_city",
    "subcontractor_count_city",
    "eeo_certification_number_city",
    "addenda_count_city",
    "pricing_sheet_number_city",
    "legal_business_name_value",
    "duns_uei_value",
    "naics_codes_value",
    "sam_gov_number",
    "bonding_capacity_value",
    "project_approach_date",
    "key_personnel_count",
    "pricing_justification_date",
)


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "company_checklist",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=False),
        sa.Column("last_updated_by", sa.String(255), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False,
        ),
        *[
            sa.Column(name, sa.Boolean(), server_default=sa.false(), nullable=False)
            for name in _FLAG_COLUMNS
        ],
        *[sa.Column(name, sa.Text(), nullable=True) for name in _VALUE_COLUMNS],
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("company_id", name="uq_company_checklist_company_id"),
    )
    op.create_index("ix_company_checklist_company_id", "company_checklist", ["company_id"])


def downgrade() -> None:
    op.drop_index("ix_company_checklist_company_id", table_name="company_checklist")
    op.drop_table("company_checklist")
    op.drop_table("companies")
