from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # RSA
    rsa_key_size: int = Field(default=3072, ge=2048)
    rsa_public_exponent: int = 65537

    model_config = SettingsConfigDict(
        env_prefix="JWKFORGE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("rsa_public_exponent")
    @classmethod
    def validate_public_exponent(cls, v: int) -> int:
        if v not in (3, 65537):
            raise ValueError("RSA public exponent must be 3 or 65537")
        return v


settings = Settings()
