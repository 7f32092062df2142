"""User Schemas — create/patch payloads and user response shapes.

Invariants:
    - CreateUser requires name and userPreference; email/address optional
    - PatchUser: all optional; userPreference, when sent, must be complete
    - List/get responses embed only userPreference.receiveEmail; create/patch embed the full row
"""

from datetime import datetime
from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import Field

from storefront.schemas.base import PatchModel, RequestModel, ResponseModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

UserName = Annotated[str, Field(strict=True, min_length=1, max_length=30)]
Email = Annotated[str, Field(strict=True, max_length=254, pattern=EMAIL_PATTERN)]
Address = Annotated[str, Field(strict=True, max_length=500)]


class UserPreferenceInput(RequestModel):
    receive_email: bool = Field(strict=True)


class CreateUser(RequestModel):
    """User creation — nested preference is created in the same transaction."""
    email: Email | None = None
    name: UserName
    address: Address | None = None
    user_preference: UserPreferenceInput


class PatchUser(PatchModel):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"email", "address"})

    email: Email | None = None
    name: UserName | None = None
    address: Address | None = None
    user_preference: UserPreferenceInput | None = None


class SaveProduct(RequestModel):
    product_id: UUID


class UserPreferenceSummary(ResponseModel):
    receive_email: bool


class UserPreferenceResponse(ResponseModel):
    id: UUID
    user_id: UUID
    receive_email: bool
    created_at: datetime
    updated_at: datetime


class UserResponse(ResponseModel):
    """User as returned by list and get-by-id."""
    id: UUID
    email: str | None
    name: str
    address: str | None
    created_at: datetime
    updated_at: datetime
    user_preference: UserPreferenceSummary | None = None


class UserWriteResponse(UserResponse):
    """User as returned by create and patch."""
    user_preference: UserPreferenceResponse | None = None
