from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_path: Path = Path("data") / "advocates.sqlite"
    api_prefix: str = "/api"
    # Pagination bounds. Out-of-range requests are clamped, never rejected.
    default_page: int = 1
    default_limit: int = 50
    max_limit: int = 100
    cors_origins: list[str] = [
        "http://127.0.0.1:3000",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_prefix": "ADVOCATES_"}


settings = Settings()
