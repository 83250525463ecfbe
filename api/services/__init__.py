"""
API Services - Request validation and response mapping for the fest admin API.
"""

from .registration_service import (
    ExportedReport,
    Failed,
    Invalid,
    NotFound,
    Ok,
    RegistrationService,
    ServiceResult,
)

__all__ = [
    "ExportedReport",
    "Failed",
    "Invalid",
    "NotFound",
    "Ok",
    "RegistrationService",
    "ServiceResult",
]
