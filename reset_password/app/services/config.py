from datetime import timedelta

from pydantic import BaseModel, Field, field_validator


class ResetRequestStoreConfig(BaseModel):
    """Settings shared by the token generator, the store and the reset use cases"""

    token_lifetime: timedelta = timedelta(hours=1)
    selector_length: int = Field(default=20, ge=1)
    verifier_length: int = Field(default=20, ge=1)
    signing_key: str = Field(min_length=1)
    request_throttle_limit: timedelta = timedelta(hours=1)
    enable_garbage_collection: bool = True

    @field_validator("token_lifetime")
    @classmethod
    def _lifetime_must_be_positive(cls, value: timedelta) -> timedelta:
        if value <= timedelta(0):
            raise ValueError("token_lifetime must be positive")
        return value

    @field_validator("request_throttle_limit")
    @classmethod
    def _throttle_must_not_be_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("request_throttle_limit must not be negative")
        return value

    @classmethod
    def from_application_config(cls, app_config) -> "ResetRequestStoreConfig":
        return cls(
            token_lifetime=timedelta(seconds=app_config.RESET_TOKEN_LIFETIME),
            selector_length=app_config.SELECTOR_LENGTH,
            verifier_length=app_config.VERIFIER_LENGTH,
            signing_key=app_config.SIGNING_KEY,
            request_throttle_limit=timedelta(seconds=app_config.REQUEST_THROTTLE_LIMIT),
            enable_garbage_collection=app_config.ENABLE_GARBAGE_COLLECTION,
        )
