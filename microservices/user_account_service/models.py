"""
User Account Service Models

Independent models for the user account microservice.
Wire names are camelCase; Python attributes are snake_case.
"""

from typing import Optional, List
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PersonalIdDocument(BaseModel):
    """Identity document attached to a user account"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True, from_attributes=True)

    document_id: str = Field(..., description="Document number")
    country_of_issue: str = Field(..., description="ISO 3166-1 alpha-2 issuing country")
    valid_until: date = Field(..., description="Expiry date")


class UserPayload(BaseModel):
    """
    Client-supplied user representation (POST and PUT bodies).

    Only built after UserValidator has accepted the raw payload; unknown
    members, including any client-sent id, are dropped.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    personal_id_document: PersonalIdDocument


class User(BaseModel):
    """Canonical user account record"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str = Field(..., description="Opaque service-assigned identifier")
    first_name: str
    last_name: str
    email: str
    date_of_birth: date
    personal_id_document: PersonalIdDocument
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProblemDetails(BaseModel):
    """RFC 7807 problem details body"""
    type: Optional[str] = Field("about:blank", description="Problem type URI")
    title: str = Field(..., description="Stable category label")
    status: int = Field(..., description="HTTP status code")
    detail: Optional[str] = None
    instance: Optional[str] = None
    errors: Optional[List[str]] = Field(None, description="Individual field errors")


# Service Status Models

class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "healthy"
    service: str = "user_account_service"
    version: str = "1.0.0"
    user_count: int = 0
    timestamp: datetime


__all__ = [
    'PersonalIdDocument', 'UserPayload', 'User',
    'ProblemDetails', 'HealthResponse',
]
