# src/cloudregions/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

DEFAULT_REMOTE_URL = "https://raw.githubusercontent.com/jasonwilbur/mcp-server-cloud-regions/main/data/regions.json"

_TRUTHY = ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    # --- Logging variables ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- HTTP client variables ---
    USER_AGENT = os.getenv("USER_AGENT", "mcp-server-cloud-regions")
    DEFAULT_TIMEOUT_CONNECT = float(os.getenv("DEFAULT_TIMEOUT_CONNECT", "5"))
    DEFAULT_TIMEOUT_READ = float(os.getenv("DEFAULT_TIMEOUT_READ", "10"))

    # --- API variables ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))

    # --- Freshness checker ---
    FRESHNESS_HASH_FILE = os.getenv("FRESHNESS_HASH_FILE", "data/source-hashes.json")

    # Loader settings are resolved from the environment at access time.
    @property
    def REMOTE_URL(self) -> str:
        return os.getenv("CLOUDREGIONS_REMOTE_URL", DEFAULT_REMOTE_URL)

    @property
    def FETCH_TIMEOUT(self) -> float:
        return float(os.getenv("CLOUDREGIONS_FETCH_TIMEOUT", "5"))

    @property
    def CACHE_TTL(self) -> float:
        return float(os.getenv("CLOUDREGIONS_CACHE_TTL", "3600"))

    @property
    def OFFLINE(self) -> bool:
        return os.getenv("CLOUDREGIONS_OFFLINE", "false").lower() in _TRUTHY

    def validate_instance(self):
        if self.LOG_LEVEL.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL.")
        if self.FETCH_TIMEOUT <= 0:
            raise ValueError("CLOUDREGIONS_FETCH_TIMEOUT must be a positive number of seconds.")
        if self.CACHE_TTL < 0:
            raise ValueError("CLOUDREGIONS_CACHE_TTL must not be negative.")
        if not 0 < self.API_PORT < 65536:
            raise ValueError("API_PORT must be between 1 and 65535.")
        if not self.REMOTE_URL.startswith(("http://", "https://")):
            logging.warning("CLOUDREGIONS_REMOTE_URL is not an http(s) URL; remote loading will fall back.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
