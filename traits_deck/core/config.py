from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from traits_deck.domain.value_objects.navigation import BoundaryPolicy


class Settings(BaseSettings):
    # Application
    app_name: str = "Treatable Traits Deck"
    version: str = "0.1.0"
    environment: str = Field(default="development")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Navigation
    navigation_policy: BoundaryPolicy = Field(default=BoundaryPolicy.CLAMPED)

    # Sessions
    max_sessions: int = Field(default=1000)
    session_cookie_name: str = Field(default="deck_session")

    # Particle backdrop
    particle_count: int = Field(default=50)
    particle_min_radius: float = Field(default=5.0)
    particle_max_radius: float = Field(default=30.0)
    particle_max_speed: float = Field(default=0.15)
    particle_palette: list[str] = Field(
        default=[
            "rgba(59, 130, 246, 0.35)",
            "rgba(99, 102, 241, 0.30)",
            "rgba(14, 165, 233, 0.30)",
            "rgba(167, 139, 250, 0.25)",
        ],
    )
    gradient_top: str = Field(default="#eff6ff")
    gradient_bottom: str = Field(default="#e0e7ff")
    frame_interval_sec: float = Field(default=1 / 60)
    frame_queue_size: int = Field(default=2)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
settings = Settings()
