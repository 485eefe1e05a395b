from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    EVENT_LABEL: str = "Reencuentro FIGMM 2025"

    # comma separated, matched case-insensitively
    ACCESS_CODES: str = "FIGMM2025,EGRESADO001,REENCUENTRO01"

    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    TABLE_COUNT: int = Field(default=30, ge=1)
    SEATS_PER_TABLE: int = Field(default=10, ge=1)

    # half-circle ("herradura") the tables are laid along
    ARRANGEMENT_RADIUS: float = 200
    ARRANGEMENT_CENTER_X: float = 400
    ARRANGEMENT_CENTER_Y: float = 300
    ARRANGEMENT_ARC_DEGREES: float = 180
    ARRANGEMENT_START_DEGREES: float = 180

    TABLE_RADIUS: float = 40
    SEAT_OFFSET: float = 20  # gap between the table edge and seat centers
    SEAT_RADIUS: float = 12

    CANVAS_WIDTH: int = 800
    CANVAS_HEIGHT: int = 600
    STAGE_X: float = 300
    STAGE_Y: float = 50
    STAGE_WIDTH: float = 200
    STAGE_HEIGHT: float = 80
    STAGE_LABEL: str = "ESCENARIO"

    def cors_list(self) -> list[str]:
        return [x.strip() for x in self.CORS_ORIGINS.split(",") if x.strip()]

    def access_code_list(self) -> list[str]:
        return [x.strip() for x in self.ACCESS_CODES.split(",") if x.strip()]


settings = Settings()
