from typing import Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    unstructured_api_key: Optional[str] = None
    unstructured_api_url: str = "https://api.unstructured.io/general/v0/general"
    # hi_res is slower than "fast" but returns usable coordinates
    unstructured_strategy: str = "hi_res"
    unstructured_timeout_seconds: float = 120.0

    # "auto" uses Unstructured when an API key is configured, local readers otherwise
    document_reader: str = "auto"
    max_upload_size_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
