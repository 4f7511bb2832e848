from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled data files, one directory per locale
PACKAGE_DATA_DIR = Path(__file__).parent / "data"

# Port the Legends of Runeterra client serves its local API on
DEFAULT_GAME_CLIENT_PORT = 21337


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Runeterra"
    debug: bool = False
    log_level: str = "INFO"

    # Directory holding globals-<locale>.json and set*-<locale>.json.
    # None means the data bundled with the package.
    data_dir: Path | None = None
    locale: str = "en_us"

    game_client_host: str = "localhost"
    game_client_port: int = DEFAULT_GAME_CLIENT_PORT
    # None leaves httpx's default timeout in place
    game_client_timeout: float | None = None

    @property
    def game_client_url(self) -> str:
        return f"http://{self.game_client_host}:{self.game_client_port}"


settings = Settings()
