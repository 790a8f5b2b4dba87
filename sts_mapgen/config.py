"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Anchors, in map screen coordinates
    start_x: float = Field(default=1100.0, description="Start anchor x")
    start_y: float = Field(default=850.0, description="Start anchor y")
    end_x: float = Field(default=1100.0, description="End anchor x")
    end_y: float = Field(default=150.0, description="End anchor y")

    # Generation
    min_radius: float = Field(
        default=80.0, gt=0, description="Minimum separation between sampled points"
    )
    penalty: int = Field(
        default=10000, gt=0, description="Cost added to one edge of each accepted path"
    )
    seed: Optional[int] = Field(default=None, description="Random seed")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    @property
    def start(self) -> tuple:
        return (self.start_x, self.start_y)

    @property
    def end(self) -> tuple:
        return (self.end_x, self.end_y)

    class Config:
        env_prefix = "MAPGEN_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
