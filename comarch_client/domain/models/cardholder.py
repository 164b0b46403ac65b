"""Card-holder profile model and the provider's dictionary codes."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MaritalStatus(str, Enum):
    """Codes of the provider's CRH_FAMILY_STATUS dictionary."""

    MARIED = "MARIED"  # married (male)
    MARRIED = "MARRIED"  # married (female)
    UNMARIED = "UNMARIED"  # single (male)
    UNMARRIED = "UNMARRIED"  # single (female)


class FavoriteCategory(str, Enum):
    """Codes of the provider's PRD_SGM_FAVORITE dictionary."""

    GROCERY = "73:X_FD_Бакалея"
    ALCOHOL = "73:X_FD_Alcohol"
    HOME_AND_GARDEN = "73:X_FD_соп.тор"
    READY_MEALS = "73:X_FD_Got.kulin.salat"
    HEALTHY_FOOD = "73:X_FD_Диаб.пит"
    DAIRY = "73:X_FD_Мол.гас"
    MEAT_AND_POULTRY = "73:X_FD_мяс.изд"
    FRUIT_AND_VEGETABLES = "73:X_FD_Ов.фр"
    FISH_AND_SEAFOOD = "73:X_FD_Рыб.гас"
    SOFT_DRINKS = "73:X_FD_Со.во.пи"
    DELICATESSEN = "73:X_FD_Mias.gastranom"
    CHILDREN = "73:X_FD_Тов.дет"
    BAKERY = "73:X_FD_Хл.бу.из."


class PersonalData(BaseModel):
    """Profile of a card holder as accepted by the card-holder endpoint.

    The provider requires ``name``, ``surname``, ``birthday``,
    ``mobile_phone`` and ``accept_adv`` when creating an account. They are not
    checked here: the record is sent as-is and the provider rejects incomplete
    data with a non-200 status.

    ``marital_status`` and ``fav_prd_segment`` hold raw dictionary codes (see
    :class:`MaritalStatus` and :class:`FavoriteCategory`) and are left out of
    the payload when unset.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = ""
    surname: str = ""
    street: str = ""
    home_fraction: str = Field(default="", alias="homeFraction")
    building: str = ""
    flat: str = ""
    post_code: str = Field(default="", alias="postCode")
    city: str = ""
    birthday: str = ""
    phone: str = ""
    second_phone: str = Field(default="", alias="secondPhone")
    mobile_phone: str = Field(default="", alias="mobilePhone")
    mail: str = ""
    marital_status: str | None = Field(default=None, alias="maritalStatus")
    children: int = 0
    post_notification: bool = Field(default=False, alias="postNotification")
    phone_notification: bool = Field(default=False, alias="phoneNotification")
    mail_notification: bool = Field(default=False, alias="mailNotification")
    sms_adv: bool = Field(default=False, alias="smsAdv")
    sms_notification: bool = Field(default=False, alias="smslNotification")
    # YYYY-MM-DD
    fav_prd_change_date: str = Field(default="", alias="favPrdChangeDate")
    fav_prd_segment: str | None = Field(default=None, alias="favPrdSegment")
    accept_adv: bool = Field(default=False, alias="acceptAdv")
    sex: str = ""
    push_notification: bool = Field(default=False, alias="pushNotification")
    golden: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body expected by the provider."""
        return self.model_dump(by_alias=True, exclude_none=True)
