"""Core configuration module."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AVAILABLE_MODULES = [
    "base",
    "web",
    "mail",
    "contacts",
    "calendar",
    "crm",
    "sale",
    "purchase",
    "stock",
    "account",
    "project",
    "hr",
    "helpdesk",
    "website",
    "mass_mailing",
    "documents",
    "sign",
    "voip",
    "knowledge",
    "studio",
]


class Settings(BaseSettings):
    """Portal settings.

    All configuration is loaded from environment variables following 12-factor app principles.
    The portal keeps no state of its own, so most settings describe how to reach the
    provisioning API and how pages present its records.

    Attributes:
        PROJECT_NAME: Name shown in page titles and the sidebar
        VERSION: Portal version
        ENVIRONMENT: Application environment (production, development, testing)
        SECRET_KEY: Secret used to sign the NiceGUI browser storage cookie
        API_BASE_URL: Base URL of the provisioning REST API
        API_TIMEOUT_SECONDS: Timeout applied to every API request
        INSTANCE_POLL_INTERVAL_SECONDS: Refresh interval of the customer instance list
        INSTANCE_DOMAIN_SUFFIX: Suffix appended to a workspace name to build its domain
        INSTANCE_PUBLIC_HOST: Host used to build the "open instance" URL
        ADMIN_RECENT_INSTANCES: Number of instances listed on the admin overview
        ESTIMATED_REVENUE_PER_INSTANCE: Monthly revenue assumed per instance for the MRR forecast
        CURRENCY_SYMBOL: Symbol appended to amounts
        PAYMENT_SUCCESS_REDIRECT_SECONDS: Countdown before leaving the payment success page
        GOOGLE_CLIENT_ID: OAuth client id enabling Google sign-in (disabled when unset)
        SUPPORT_EMAIL: Address behind the "contact support" links
        AVAILABLE_MODULES: Modules offered by the admin plan editor
        HOST: Bind address for the web server
        PORT: Bind port for the web server
    """

    PROJECT_NAME: str = "Launchpad Portal"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: str = Field(
        default="production",
        description="Application environment (production, development, testing). Defaults to production for security.",
    )

    # Security
    SECRET_KEY: str = Field(
        default="k5moVLqLGy82D4FE54VvkkqAyxe6XF6k",
        description="Secret used to sign the browser storage cookie",
    )

    # Provisioning API
    API_BASE_URL: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the provisioning REST API",
    )
    API_TIMEOUT_SECONDS: float = Field(
        default=15.0,
        gt=0,
        description="Timeout in seconds applied to every API request",
    )

    # Instances
    INSTANCE_POLL_INTERVAL_SECONDS: float = Field(
        default=5.0,
        ge=1,
        description="Refresh interval of the customer instance list",
    )
    INSTANCE_DOMAIN_SUFFIX: str = Field(
        default=".localhost",
        description="Suffix appended to a workspace name to build the instance domain",
    )
    INSTANCE_PUBLIC_HOST: str = Field(
        default="localhost",
        description="Host used to build the URL of a running instance",
    )

    # Admin overview
    ADMIN_RECENT_INSTANCES: int = Field(
        default=6,
        ge=1,
        description="Number of instances listed on the admin overview",
    )
    ESTIMATED_REVENUE_PER_INSTANCE: float = Field(
        default=49.0,
        ge=0,
        description="Monthly revenue assumed per instance for the MRR forecast",
    )

    # Billing
    CURRENCY_SYMBOL: str = Field(default="€", description="Currency symbol")
    PAYMENT_SUCCESS_REDIRECT_SECONDS: int = Field(
        default=5,
        ge=0,
        description="Countdown before the payment success page redirects",
    )

    # Federated login
    GOOGLE_CLIENT_ID: str | None = Field(
        default=None,
        description="Google OAuth client id. Google sign-in is hidden when unset.",
    )

    SUPPORT_EMAIL: str = Field(
        default="support@example.com",
        description="Support contact address",
    )

    AVAILABLE_MODULES: list[str] = Field(
        default_factory=lambda: list(DEFAULT_AVAILABLE_MODULES),
        description="Modules offered by the admin plan editor",
    )

    # Web server
    HOST: str = Field(default="0.0.0.0", description="Bind address")  # noqa: S104
    PORT: int = Field(default=3000, ge=1, le=65535, description="Bind port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level for loguru")
    log_to_file: bool = Field(default=False, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/portal.log", description="Path to log file"
    )
    log_retention: str = Field(
        default="10 days",
        description="Log file retention policy",
    )
    log_rotation: str = Field(default="10 MB", description="Log file rotation policy")

    @property
    def cookies_secure(self) -> bool:
        """Determine if cookies should be secure based on environment.

        Returns:
            bool: True if cookies should be secure (HTTPS only), False otherwise
        """
        return self.ENVIRONMENT.lower() == "production"

    def instance_url(self, port: int | None) -> str | None:
        """Build the public URL of an instance from its port."""
        if port is None:
            return None
        return f"http://{self.INSTANCE_PUBLIC_HOST}:{port}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
