"""Application configuration via Pydantic Settings.

NOTE: Environment names are mapped explicitly (DATABASE_URL, ALLOW_ORIGIN,
GLOBE_*) so a typo in .env cannot silently fall back to a default key.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from app.domain.value_objects.camera import GlobeConfig


class Settings(BaseSettings):
    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data/offices.db",
        validation_alias="DATABASE_URL",
    )
    data_path: str = Field(default="data", validation_alias="DATA_PATH")
    seed_on_startup: bool = Field(default=True, validation_alias="SEED_ON_STARTUP")

    # HTTP
    host: str = Field(default="127.0.0.1", validation_alias="HOST")
    port: int = Field(default=5175, validation_alias="PORT")
    allow_origin: str = Field(default="http://localhost:5173", validation_alias="ALLOW_ORIGIN")

    # Globe behaviour
    globe_resume_delay_seconds: float = Field(default=15.0, validation_alias="GLOBE_RESUME_DELAY_SECONDS")
    globe_rotation_step_degrees: float = Field(default=0.03, validation_alias="GLOBE_ROTATION_STEP_DEGREES")
    globe_marker_base_size: int = Field(default=24, validation_alias="GLOBE_MARKER_BASE_SIZE")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.allow_origin.split(",") if o.strip()]

    def globe_config(self) -> GlobeConfig:
        return GlobeConfig(
            resume_delay_seconds=self.globe_resume_delay_seconds,
            rotation_step_degrees=self.globe_rotation_step_degrees,
            marker_base_size=self.globe_marker_base_size,
        )


settings = Settings()
