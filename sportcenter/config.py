from typing import List
import os

from dotenv import load_dotenv
from pydantic import BaseModel, validator

# Load .env variables
load_dotenv()


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseModel):
    port: int = 3001
    jwt_secret: str = "change-me"
    access_token_expire_days: int = 7
    frontend_origins: List[str] = ["http://localhost:3000", "http://localhost:8000"]
    environment: str = "development"
    database_url: str = "sqlite:///./nylose.db"
    upload_dir: str = "./uploads"
    admin_email: str = "admin@nylose.se"
    admin_password: str = "admin123"

    @validator("admin_email")
    def normalize_admin_email(cls, v):
        # Login lowercases the address it looks up
        return v.strip().lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        frontend_url = os.getenv("FRONTEND_URL")
        return cls(
            port=int(os.getenv("PORT", str(defaults.port))),
            jwt_secret=os.getenv("JWT_SECRET", defaults.jwt_secret),
            access_token_expire_days=int(
                os.getenv(
                    "ACCESS_TOKEN_EXPIRE_DAYS", str(defaults.access_token_expire_days)
                )
            ),
            frontend_origins=(
                _split_origins(frontend_url)
                if frontend_url
                else defaults.frontend_origins
            ),
            environment=os.getenv(
                "APP_ENV", os.getenv("NODE_ENV", defaults.environment)
            ),
            database_url=os.getenv("DATABASE_URL", defaults.database_url),
            upload_dir=os.getenv("UPLOAD_DIR", defaults.upload_dir),
            admin_email=os.getenv("ADMIN_EMAIL", defaults.admin_email),
            admin_password=os.getenv("ADMIN_PASSWORD", defaults.admin_password),
        )
