"""Balance and point models returned by the balance-info endpoint."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Date format used by the provider in response bodies.
DATETIME_FORMAT = "%Y-%m-%d %H:%M"


def parse_provider_datetime(value: str) -> datetime:
    """Parse a provider timestamp such as ``"2019-03-01 18:30"``.

    Response models keep these values as raw strings; call this helper when a
    structured timestamp is needed.

    Raises:
        ValueError: If ``value`` does not match :data:`DATETIME_FORMAT`.
    """
    return datetime.strptime(value, DATETIME_FORMAT)


class BalanceInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    balance: int = 0
    # Identifies the balance when a card holds several of them.
    balance_id: int = Field(default=0, alias="balanceID")
    # Conversion rate of points to currency.
    balance_rate: int = Field(default=0, alias="balanceRate")


class ExpressPoints(BaseModel):
    """Points that were issued together and expire on the same date."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    points: int = 0
    issue_date: str = Field(default="", alias="issueDate")
    expiry_date: str = Field(default="", alias="expiryDate")


class BalanceInfoResponse(BaseModel):
    """Balance state of the signed-in card holder."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    card_no: str = Field(default="", alias="cardNo")
    # Last visit, DATETIME_FORMAT.
    last_auth: str = Field(default="", alias="lastAuth")
    balance_info: BalanceInfo = Field(default_factory=BalanceInfo, alias="balanceInfo")
    express_points: list[ExpressPoints] = Field(
        default_factory=list, alias="expressPoints"
    )

    @field_validator("express_points", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return [] if value is None else value
