"""Environment-driven settings for the booking service.

All configuration comes from environment variables so the same build runs
locally (against DynamoDB Local or moto) and on AWS Lambda.

Variables:
    ENVIRONMENT: Deployment mode (dev/production). Controls cookie flags.
    AWS_REGION: Region of the DynamoDB tables.
    DYNAMODB_ENDPOINT_URL: Optional endpoint override (DynamoDB Local).
    DYNAMODB_TABLE_PREFIX: Table name prefix, defaults to dreamstay-{env}.
    ACCESS_TOKEN_SECRET: HMAC secret for identity tokens (required in production).
    ACCESS_TOKEN_TTL_SECONDS: Token validity window.
    STORE_TIMEOUT_SECONDS: Connect/read timeout for storage calls.
    PORT: Listening port for the local server.
    CORS_ORIGINS: Comma separated list of allowed browser origins.
"""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

PRODUCTION = "production"
DEV_TOKEN_SECRET = "dreamstay-dev-secret"


class Settings(BaseModel):
    """Runtime settings for the API and its storage handle."""

    model_config = ConfigDict(frozen=True)

    environment: str = "dev"
    aws_region: str = "eu-west-1"
    dynamodb_endpoint_url: str | None = None
    table_prefix: str = "dreamstay-dev"
    token_secret: str = Field(default=DEV_TOKEN_SECRET, min_length=8)
    token_ttl_seconds: int = Field(default=3600, gt=0)
    store_timeout_seconds: float = Field(default=5.0, gt=0)
    port: int = 5000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"]
    )

    @property
    def is_production(self) -> bool:
        return self.environment == PRODUCTION

    @property
    def cookie_secure(self) -> bool:
        """Credential cookies are HTTPS-only in production."""
        return self.is_production

    @property
    def cookie_samesite(self) -> str:
        """Production frontends live on another site, so the cookie must cross sites."""
        return "none" if self.is_production else "strict"


def table_prefix(environment: str) -> str:
    """Table name prefix for an environment; DYNAMODB_TABLE_PREFIX overrides it."""
    return os.getenv("DYNAMODB_TABLE_PREFIX") or f"dreamstay-{environment}"


def load_settings() -> Settings:
    """Build Settings from the process environment.

    Raises:
        ValueError: If running in production without ACCESS_TOKEN_SECRET.
    """
    environment = os.getenv("ENVIRONMENT", "dev")
    secret = os.getenv("ACCESS_TOKEN_SECRET")

    if not secret:
        if environment == PRODUCTION:
            raise ValueError("ACCESS_TOKEN_SECRET is not set. Refusing to start in production.")
        logger.warning("ACCESS_TOKEN_SECRET not set, using development secret")
        secret = DEV_TOKEN_SECRET

    origins = os.getenv("CORS_ORIGINS")

    kwargs: dict = {
        "environment": environment,
        "aws_region": os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION", "eu-west-1")),
        "dynamodb_endpoint_url": os.getenv("DYNAMODB_ENDPOINT_URL") or None,
        "table_prefix": table_prefix(environment),
        "token_secret": secret,
        "token_ttl_seconds": int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "3600")),
        "store_timeout_seconds": float(os.getenv("STORE_TIMEOUT_SECONDS", "5")),
        "port": int(os.getenv("PORT", "5000")),
    }
    if origins:
        kwargs["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    return Settings(**kwargs)
