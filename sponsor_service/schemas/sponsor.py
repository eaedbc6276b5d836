# sponsor_service/schemas/sponsor.py
"""
Pydantic schemas for the sponsor upsert operation.

The wire format is camelCase; attributes are snake_case.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SponsorUpsertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # 0 and absent both mean "no existing sponsor"
    sponsor_id: Optional[int] = Field(None, alias="sponsorId", ge=0)
    event_id: int = Field(..., alias="eventId", gt=0)
    edition_id: Optional[int] = Field(None, alias="editionId", gt=0)
    company_id: Optional[int] = Field(None, alias="companyId", gt=0)
    name: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=500)
    title: Optional[str] = Field(None, max_length=255)
    # Either a base64 data URL ("data:image/png;base64,...") or an attachment id
    logo: Optional[Union[int, str]] = None
    position: Optional[int] = Field(None, ge=0)
    # -1 means "delete this sponsor"
    published: Optional[int] = Field(None, ge=-1)
    verified: Optional[bool] = None

    @field_validator("sponsor_id")
    @classmethod
    def zero_means_new(cls, v: Optional[int]) -> Optional[int]:
        return v or None

    @property
    def is_deletion(self) -> bool:
        return self.published == -1


class UpsertStatus(BaseModel):
    code: int  # 1 = success, 0 = failure
    message: str


class SponsorUpsertData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sponsor_id: int = Field(..., alias="sponsorId")


class SponsorUpsertResponse(BaseModel):
    status: UpsertStatus
    data: Optional[SponsorUpsertData] = None

    @classmethod
    def success(cls, message: str, sponsor_id: int) -> "SponsorUpsertResponse":
        return cls(
            status=UpsertStatus(code=1, message=message),
            data=SponsorUpsertData(sponsor_id=sponsor_id),
        )

    @classmethod
    def failure(cls, message: str) -> "SponsorUpsertResponse":
        return cls(status=UpsertStatus(code=0, message=message))

    @property
    def ok(self) -> bool:
        return self.status.code == 1
