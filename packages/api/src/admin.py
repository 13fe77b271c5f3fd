# This project was developed with assistance from AI tools.
"""
SQLAdmin views over companies and their checklists.

Mounted at /admin. Login uses SQLADMIN_USER / SQLADMIN_PASSWORD unless
AUTH_DISABLED=true, in which case the panel is open.
"""

from db import Company, CompanyChecklist
from db.database import engine
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request
from starlette.responses import Response

from .core.config import settings


class AdminAuth(AuthenticationBackend):
    """Session-cookie login for the admin panel."""

    async def login(self, request: Request) -> bool:
        form = await request.form()
        if (
            form.get("username") == settings.SQLADMIN_USER
            and form.get("password") == settings.SQLADMIN_PASSWORD
        ):
            request.session.update({"admin_authenticated": True})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> Response | bool:
        if settings.AUTH_DISABLED:
            return True
        return bool(request.session.get("admin_authenticated", False))


class CompanyAdmin(ModelView, model=Company):
    column_list = [Company.id, Company.name, Company.created_at]
    column_searchable_list = [Company.name]
    column_sortable_list = [Company.id, Company.name, Company.created_at]
    column_default_sort = [(Company.created_at, True)]
    name = "Company"
    name_plural = "Companies"
    icon = "fa-solid fa-building"


class CompanyChecklistAdmin(ModelView, model=CompanyChecklist):
    column_list = [
        CompanyChecklist.id,
        CompanyChecklist.company_id,
        CompanyChecklist.last_updated_by,
        CompanyChecklist.updated_at,
    ]
    column_sortable_list = [CompanyChecklist.id, CompanyChecklist.updated_at]
    column_default_sort = [(CompanyChecklist.updated_at, True)]
    # Rows are created lazily by the API, one per company
    can_create = False
    name = "Checklist"
    name_plural = "Checklists"
    icon = "fa-solid fa-list-check"


def setup_admin(app):
    """Set up SQLAdmin and mount it to the FastAPI app."""
    auth_backend = AdminAuth(secret_key=settings.SQLADMIN_SECRET_KEY)
    admin = Admin(app, engine, title="BidReady Admin", authentication_backend=auth_backend)

    admin.add_view(CompanyAdmin)
    admin.add_view(CompanyChecklistAdmin)

    return admin
