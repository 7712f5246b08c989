"""
Core settings and environment variables for SafeRoute.
Uses pydantic-settings for type-safe environment variable loading.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Create a .env file in the root directory to configure these.
    """

    # Application
    APP_NAME: str = "SafeRoute"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # CORS - Frontend URLs allowed to access this API (comma separated)
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Persistence
    # - STORAGE_BACKEND: "file" (default, JSON array on disk) or "firestore"
    STORAGE_BACKEND: str = "file"
    DATA_FILE_PATH: str = "./data/incidents.json"
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None  # Path to service account JSON

    # Time-of-day buckets are computed in this zone
    LOCAL_TIMEZONE: str = "America/New_York"

    # Category classification (zero-shot via Hugging Face Inference API)
    AI_ENABLED: bool = True  # If False, keyword matching only
    HUGGINGFACE_API_KEY: Optional[str] = None
    HUGGINGFACE_MODEL: str = "facebook/bart-large-mnli"
    HUGGINGFACE_API_URL: str = "https://router.huggingface.co/hf-inference/models"
    AI_TIMEOUT_SECONDS: float = 10.0

    # Geocoding
    # - GEOCODING_PROVIDER: "nominatim" (default, no API key) or "google"
    # - GOOGLE_MAPS_API_KEY: optional; only used when provider is "google"
    GEOCODING_PROVIDER: str = "nominatim"
    GOOGLE_MAPS_API_KEY: Optional[str] = None
    GEOCODER_USER_AGENT: str = "saferoute/0.1"
    GEOCODER_TIMEOUT_SECONDS: float = 3.0
    GEOCODER_RESULT_LIMIT: int = 5
    GEOCODER_DELAY_SECONDS: float = 1.0  # Nominatim usage policy: 1 request/second

    # Upper bound for one enrichment (location resolution + classification)
    ENRICHMENT_DEADLINE_SECONDS: float = 20.0

    # SMS (Twilio webhook)
    TWILIO_ACCOUNT_SID: Optional[str] = None
    TWILIO_AUTH_TOKEN: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "allow"

    @property
    def cors_origins_list(self) -> list:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


# Global settings instance
settings = Settings()
