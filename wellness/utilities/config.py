"""Configuration management for the Wellness dashboard."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Remote service (all domain logic lives there)
BACKEND_URL: Final[str] = os.getenv('BACKEND_URL', 'http://localhost:8000').rstrip('/')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8080'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Notices kept in memory for the polling endpoint
MAX_NOTICES: Final[int] = int(os.getenv('MAX_NOTICES', '100'))
