from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Manages all application settings. Loads variables from environment and a .env file.
    """

    # --- Application Metadata ---
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    PROJECT_NAME: str = "CEP Lookup API"
    VERSION: str = "v1"
    # Mount point for the address routes, e.g. "/api/v1". Empty serves them at the root.
    API_PREFIX: str = ""

    FRONTEND_URL: str = "*"

    # --- Address directory (ViaCEP) ---
    CEP_PROVIDER_BASE_URL: str = "https://viacep.com.br"

    # --- HTTP client pool ---
    # Prefer True in production for certificate validation
    HTTPX_VERIFY_SSL: bool = True
    HTTPX_MAX_KEEPALIVE: int = 20
    HTTPX_MAX_CONNECTIONS: int = 100
    HTTPX_KEEPALIVE_EXPIRY: int = 60
    REQUEST_TIMEOUT: float = 5.0

    # --- Display formatting ---
    DISPLAY_TIMEZONE: str = "America/Sao_Paulo"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
