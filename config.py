import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "Library Catalogue")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")

    # Data file loaded into the catalogue on startup (CSV, optional)
    data_file: str = os.getenv("LIBRARY_DATA_FILE", "")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # CLI
    prompt: str = os.getenv("LIB_CLI_PROMPT", "> ")
    config_dir: str = os.getenv("LIB_CLI_CONFIG_DIR", os.path.join(os.path.expanduser("~"), ".library-cli"))
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain").lower()


settings = Settings()
