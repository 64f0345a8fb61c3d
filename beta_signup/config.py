import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Resend Email Configuration
RESEND_API_KEY = os.getenv("RESEND_API_KEY")
EMAIL_FROM_ADDRESS = os.getenv("EMAIL_FROM_ADDRESS", "GoalHero Team <info@goalhero.eu>")

# Welcome email languages - first entry is the fallback when none is sent
SUPPORTED_LANGUAGES = ("en", "es")
DEFAULT_LANGUAGE = SUPPORTED_LANGUAGES[0]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
