import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from the environment (and ``.env`` if present)."""
    data_dir = os.getenv("GEO_DATA_DIR")

    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url and frontend_url not in origins:
        origins.append(frontend_url)

    return Settings(
        data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
        allowed_origins=origins or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
