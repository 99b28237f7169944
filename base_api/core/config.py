from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, ValidationError, field_validator
from functools import lru_cache
import structlog

logger = structlog.get_logger()


class Settings(BaseSettings):
    """
    Base API configuration.

    Sensitive values MUST be provided via environment variables.
    The service fails fast if required security configuration is missing.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Base API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Security settings - SECRET_KEY is REQUIRED, NO DEFAULT
    SECRET_KEY: str = Field(..., min_length=32)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60, ge=5, le=1440)
    PASSWORD_RESET_TOKEN_EXPIRE_MINUTES: int = Field(default=60, ge=5, le=1440)
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=16)

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://postgres@localhost:5432/base_api"
    DATABASE_ECHO: bool = False
    DATABASE_AUTO_CREATE: bool = False

    # Redis / job queue
    REDIS_URL: str = "redis://localhost:6379/0"
    QUEUE_NAME: str = "test-messages"
    JOB_TIMEOUT_SECONDS: int = Field(default=300, ge=1)
    JOB_RESULT_TTL_SECONDS: int = Field(default=86400, ge=0)
    JOB_SIMULATED_DELAY_SECONDS: float = Field(default=1.0, ge=0)

    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Reject obvious placeholder secrets."""
        bad_values = ["your-secret-key", "change-me", "changeme", "12345"]
        if any(bad in v.lower() for bad in bad_values):
            raise ValueError("SECRET_KEY contains weak or default values")
        return v

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        valid_envs = ["development", "test", "staging", "production"]
        if v not in valid_envs:
            raise ValueError(f"ENVIRONMENT must be one of: {valid_envs}")
        return v


def validate_required_settings(settings: Settings) -> None:
    """
    Validate cross-field requirements.
    Fail fast if critical settings are missing or inconsistent.
    """
    errors = []

    if settings.ENVIRONMENT == "production":
        if settings.DEBUG:
            errors.append("DEBUG must be False in production")

        if settings.DATABASE_AUTO_CREATE:
            errors.append("DATABASE_AUTO_CREATE must be False in production")

        if "localhost" in settings.DATABASE_URL.lower():
            errors.append("DATABASE_URL cannot use localhost in production")

        if "localhost" in settings.REDIS_URL.lower():
            errors.append("REDIS_URL cannot use localhost in production")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        logger.error("Configuration validation failed", errors=errors)
        raise ValueError(error_msg)

    logger.info(
        "Configuration validated successfully",
        environment=settings.ENVIRONMENT,
        debug=settings.DEBUG,
        queue_name=settings.QUEUE_NAME,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Raises if required environment variables are missing.
    """
    try:
        settings = Settings()
    except ValidationError as e:
        logger.error(
            "Failed to load settings",
            errors=[
                {"field": ".".join(str(p) for p in err.get("loc", ())), "msg": err.get("msg")}
                for err in e.errors()
            ],
        )
        raise
    validate_required_settings(settings)
    return settings
