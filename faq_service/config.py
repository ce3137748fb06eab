import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application configuration from environment variables"""

    # App
    app_name: str = "FAQ Service"
    debug: bool = os.getenv("DEBUG", "False").lower() == "true"

    # Server
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Database
    database_path: str = os.getenv("DATABASE_PATH", "faq.db")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Behaviour
    startup_self_test: bool = True
    expose_error_details: bool = True  # set False to keep engine messages out of 500 bodies
    enable_debug_routes: bool = True
    index_file: str = "index.html"

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def database_url(self) -> str:
        return f"sqlite:///{self.database_path}"


settings = Settings()
