# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .enums import InputType, Jurisdiction, UserRole
from .models import CHECKLIST_METADATA_COLUMNS, Company, CompanyChecklist

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Enums
    "InputType",
    "Jurisdiction",
    "UserRole",
    # Models
    "CHECKLIST_METADATA_COLUMNS",
    "Company",
    "CompanyChecklist",
]
