"""
Shared input validators

Reusable pydantic types and request models so every entry point validates
users, leads, checkout, organizations and pagination the same way.
Payloads use camelCase keys; snake_case names are accepted too.
"""
import re
from datetime import datetime
from typing import Annotated, List, Literal, Optional

from pydantic import AnyUrl, BaseModel, BeforeValidator, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
# UTC timestamps only, e.g. 2026-01-05T10:00:00Z or 2026-01-05T10:00:00.123Z
ISO_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?Z$")


def _iso_datetime_string(value):
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not ISO_DATETIME.match(value):
        raise ValueError("Invalid datetime, expected an ISO 8601 UTC timestamp")
    return value


def _number_not_string(value):
    if isinstance(value, (str, bool)):
        raise ValueError("Expected a number")
    return value


IsoDatetime = Annotated[datetime, BeforeValidator(_iso_datetime_string)]

# ============================================
# USER
# ============================================

UserEmail = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, max_length=320, pattern=EMAIL_PATTERN)
]
UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
ApiKey = Annotated[str, StringConstraints(min_length=32, max_length=256, pattern=r"^[a-zA-Z0-9_-]+$")]

# ============================================
# LEAD
# ============================================

LeadName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
LeadPhone = Annotated[str, StringConstraints(max_length=20, pattern=r"^\+?[\d\s\-\(\)]{8,}$")]
# Empty string means "no email"
LeadEmail = Annotated[
    str, StringConstraints(strip_whitespace=True, max_length=320, pattern=rf"(^$)|({EMAIL_PATTERN})")
]
Neighborhood = Annotated[str, StringConstraints(strip_whitespace=True, min_length=2, max_length=100)]
Budget = Annotated[float, Field(gt=0, le=999999999), BeforeValidator(_number_not_string)]
Notes = Annotated[str, StringConstraints(max_length=1000)]

LeadObjective = Literal["comprar", "vender", "alugar", "arrendar", "consulta"]
PropertyType = Literal["apartamento", "casa", "terreno", "comercial", "outro"]
Urgency = Literal["baixa", "média", "alta"]
LeadStatus = Literal["novo", "contatado", "qualificado", "descartado"]


class InputModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConversationMessage(InputModel):
    sender: Literal["user", "contact"]
    text: Annotated[str, StringConstraints(min_length=1)]
    timestamp: Optional[str] = None


class Conversation(InputModel):
    contact: Annotated[str, StringConstraints(min_length=1)]
    messages: Annotated[List[ConversationMessage], Field(min_length=1)]
    timestamp: Optional[IsoDatetime] = None


class AnalyzeLeadInput(InputModel):
    conversation: Conversation


class CreateLeadInput(InputModel):
    name: LeadName
    phone: LeadPhone
    email: Optional[LeadEmail] = None
    objective: LeadObjective
    property_type: PropertyType
    neighborhood: Neighborhood
    budget: Optional[Budget] = None
    urgency: Urgency
    conversation_id: Optional[str] = None
    notes: Optional[Notes] = None


class UpdateLeadInput(InputModel):
    name: Optional[LeadName] = None
    phone: Optional[LeadPhone] = None
    email: Optional[LeadEmail] = None
    objective: Optional[LeadObjective] = None
    property_type: Optional[PropertyType] = None
    neighborhood: Optional[Neighborhood] = None
    budget: Optional[Budget] = None
    urgency: Optional[Urgency] = None
    notes: Optional[Notes] = None
    status: Optional[LeadStatus] = None


# ============================================
# CHECKOUT
# ============================================

class CheckoutSessionInput(InputModel):
    price_id: Annotated[str, StringConstraints(min_length=1)]
    success_url: Optional[AnyUrl] = None
    cancel_url: Optional[AnyUrl] = None


# ============================================
# ORGANIZATION
# ============================================

OrganizationName = Annotated[str, StringConstraints(min_length=2, max_length=100)]
OrganizationSlug = Annotated[str, StringConstraints(min_length=2, max_length=50, pattern=r"^[a-z0-9-]+$")]


class CreateOrganizationInput(InputModel):
    name: OrganizationName
    slug: Optional[OrganizationSlug] = None


# ============================================
# PAGINATION / DATES
# ============================================

class PaginationInput(InputModel):
    page: Annotated[int, Field(ge=1)] = 1
    limit: Annotated[int, Field(ge=1, le=100)] = 10
    search: Optional[Annotated[str, StringConstraints(max_length=100)]] = None
    sort_by: Optional[str] = None
    sort_order: Literal["asc", "desc"] = "desc"


class DateRangeInput(InputModel):
    start_date: Optional[IsoDatetime] = None
    end_date: Optional[IsoDatetime] = None
