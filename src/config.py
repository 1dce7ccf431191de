from pathlib import Path
from pydantic_settings import BaseSettings

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent / "data" / "delhi_metro.json"

class Settings(BaseSettings):
    # Dataset
    DATASET_PATH: Path = DEFAULT_DATASET_PATH
    STRICT_DATASET: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Application
    PROJECT_NAME: str = "Delhi Metro Route Planner"
    API_V1_STR: str = "/api/v1"

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
