import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-secret-key")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "devi_trainer.apps.DeviTrainerConfig",
]

# Ensure apps are unique while preserving order
INSTALLED_APPS = list(dict.fromkeys(INSTALLED_APPS))

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Weekday trainer
DEVI_FIRST_YEAR = int(os.getenv("DEVI_FIRST_YEAR", "1932"))
DEVI_LAST_YEAR = int(os.getenv("DEVI_LAST_YEAR", "2032"))
# empty -> unseeded generator
DEVI_RNG_SEED = int(os.environ["DEVI_RNG_SEED"]) if os.getenv("DEVI_RNG_SEED") else None

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "devi_trainer": {
            "handlers": ["console"],
            "level": os.getenv("DEVI_LOG_LEVEL", "WARNING"),
        },
    },
}
