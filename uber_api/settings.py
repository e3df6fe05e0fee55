from pydantic import AnyHttpUrl
from pydantic import Field

from .domain import ValueObject

__all__ = ["ClientSettings", "PRODUCTION_URL", "SANDBOX_URL"]


PRODUCTION_URL = "https://api.uber.com/"
SANDBOX_URL = "https://sandbox-api.uber.com/"


class ClientSettings(ValueObject):
    bearer_token: str | None = None
    sandbox: bool = False
    production_url: AnyHttpUrl = AnyHttpUrl(PRODUCTION_URL)
    sandbox_url: AnyHttpUrl = AnyHttpUrl(SANDBOX_URL)
    timeout: float = Field(default=10.0, gt=0)  # in seconds
    user_agent: str = "uber-api-python"
