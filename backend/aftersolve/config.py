from __future__ import annotations
import os
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

class Settings(BaseModel):
    environment: str = os.getenv("ENVIRONMENT", "dev")
    app_name: str = os.getenv("APP_NAME", "aftersolve-api")
    app_display_name: str = os.getenv("APP_DISPLAY_NAME", "AfterSolve")
    app_version: str = os.getenv("APP_VERSION", "0.1.0")
    git_sha: str = os.getenv("GIT_SHA", "dev")
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "5000"))
    front_url: str = os.getenv("FRONT_URL", "")
    cors_origins: list[str] = [o for o in os.getenv("CORS_ORIGINS", "").split(",") if o]

    # Codeforces upstream
    codeforces_api_base: str = os.getenv("CODEFORCES_API_BASE", "https://codeforces.com/api")
    codeforces_timeout_seconds: float = float(os.getenv("CODEFORCES_TIMEOUT_SECONDS", "30"))
    codeforces_submissions_count: int = int(os.getenv("CODEFORCES_SUBMISSIONS_COUNT", "100000"))
    codeforces_include_gym: bool = os.getenv("CODEFORCES_INCLUDE_GYM", "0") == "1"

    # Paging
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
    max_page_size: int = int(os.getenv("MAX_PAGE_SIZE", "50"))

    def allowed_origins(self) -> list[str]:
        if self.environment == "dev":
            return ["*"]
        origins = list(self.cors_origins)
        if self.front_url and self.front_url not in origins:
            origins.append(self.front_url)
        return origins

settings = Settings()
