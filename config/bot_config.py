# config/bot_config.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List
from dotenv import load_dotenv
load_dotenv()

DEFAULT_RAPIDAPI_HOST = "weatherapi-com.p.rapidapi.com"
DEFAULT_PORT = 3000
PROJECT_ROOT = Path(__file__).parent.parent


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class BotConfig:
    slack_bot_token: str
    slack_app_token: str
    rapidapi_key: str
    slack_signing_secret: str = ""
    rapidapi_host: str = DEFAULT_RAPIDAPI_HOST
    port: int = DEFAULT_PORT
    socket_mode: bool = True
    log_level: str = "INFO"
    logs_dir: Path = PROJECT_ROOT / "logs"

    @classmethod
    def load(cls):
        return cls(
            slack_bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
            slack_app_token=os.getenv("SLACK_APP_TOKEN", ""),
            slack_signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
            rapidapi_key=os.getenv("RAPIDAPI_KEY", ""),
            rapidapi_host=os.getenv("RAPIDAPI_HOST", "") or DEFAULT_RAPIDAPI_HOST,
            port=int(os.getenv("PORT", "") or DEFAULT_PORT),
            socket_mode=_env_flag("SOCKET_MODE", "true"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            logs_dir=Path(os.getenv("LOGS_DIR", "") or PROJECT_ROOT / "logs"),
        )

    def missing(self) -> List[str]:
        """Names of required environment variables that are not set."""
        required = {
            "SLACK_BOT_TOKEN": self.slack_bot_token,
            "RAPIDAPI_KEY": self.rapidapi_key,
            "RAPIDAPI_HOST": self.rapidapi_host,
        }
        if self.socket_mode:
            required["SLACK_APP_TOKEN"] = self.slack_app_token
        else:
            # HTTP mode: Bolt verifies every request signature
            required["SLACK_SIGNING_SECRET"] = self.slack_signing_secret
        return [name for name, value in required.items() if not value]
