"""Account, authentication and client profile schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, Field


class UserInfo(BaseModel):
    """The authenticated user as returned by ``/me/``."""

    id: Annotated[int, Field(description="User ID")]
    username: Annotated[str, Field(description="Login name")]
    email: Annotated[str, Field(description="Email address")] = ""
    role: Annotated[str, Field(description="Role label (admin or client)")] = "client"
    is_staff: Annotated[
        bool, Field(description="Whether the user may open admin views")
    ] = False

    @property
    def display_name(self) -> str:
        """Name shown in the header."""
        return self.username or self.email

    @property
    def initial(self) -> str:
        """Avatar letter."""
        return self.display_name[:1].upper() or "?"


class TokenPair(BaseModel):
    """Access/refresh token pair.

    The token endpoint answers ``access``/``refresh`` while the federated login
    endpoint may answer ``access_token``/``refresh_token``.
    """

    access: Annotated[
        str,
        Field(
            description="Bearer access token",
            validation_alias=AliasChoices("access", "access_token"),
        ),
    ]
    refresh: Annotated[
        str | None,
        Field(
            description="Refresh token",
            validation_alias=AliasChoices("refresh", "refresh_token"),
        ),
    ] = None


class RegistrationRequest(BaseModel):
    """Self-service sign-up form."""

    username: Annotated[str, Field(min_length=1)]
    email: Annotated[str, Field(min_length=3)]
    password: Annotated[str, Field(min_length=1)]
    company_name: Annotated[str, Field(min_length=1)]
    phone: Annotated[str, Field(min_length=1)]


class ClientUser(BaseModel):
    """User account attached to a client profile."""

    id: int
    username: str
    email: str = ""


class ActiveSubscriptionSummary(BaseModel):
    """Short form of a client's active subscription."""

    plan_name: str
    status: str


class ClientProfile(BaseModel):
    """Customer company profile."""

    id: Annotated[int, Field(description="Client ID")]
    company_name: Annotated[str, Field(description="Company name")]
    phone: Annotated[str, Field(description="Contact phone")] = ""
    address: Annotated[str | None, Field(description="Postal address")] = None
    created_at: Annotated[
        datetime | None, Field(description="Sign-up timestamp")
    ] = None
    user: Annotated[ClientUser, Field(description="Owning user account")]
    active_subscription: Annotated[
        ActiveSubscriptionSummary | None,
        Field(description="Currently active subscription, if any"),
    ] = None
