# sponsor_service/schemas/token.py
from pydantic import BaseModel, field_validator


class TokenPayload(BaseModel):
    sub: str  # "sub" is the standard claim for subject (user ID)
    exp: int  # Standard claim for expiration time

    model_config = {
        "from_attributes": True,
    }

    @field_validator("sub")
    @classmethod
    def numeric_subject(cls, v: str) -> str:
        if not v.isdigit():
            raise ValueError("subject must be a numeric user id")
        return v

    @property
    def user_id(self) -> int:
        return int(self.sub)
