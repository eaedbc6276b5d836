from jose import jwt

from sponsor_service.core.config import settings
from sponsor_service.schemas.token import TokenPayload


def get_user_authentication_headers(user_id: int, exp: int = 9999999999) -> dict[str, str]:
    """
    Generates a valid JWT token and authentication headers for a test user.
    """
    payload = TokenPayload(sub=str(user_id), exp=exp)  # High expiration for tests
    token = jwt.encode(payload.model_dump(), settings.JWT_SECRET, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}
