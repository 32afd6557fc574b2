import os
from dotenv import load_dotenv
load_dotenv()


def _env_flag(name, default="1"):
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///research.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    # uploads up to 500MB
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(500 * 1024 * 1024)))

    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    # when off, processing jobs run inline in the request
    RQ_ASYNC = _env_flag("RQ_ASYNC", "1")

    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "local")
    LOCAL_STORAGE_DIR = os.getenv("LOCAL_STORAGE_DIR", "./storage")
    AUDIO_BUCKET = os.getenv("AUDIO_BUCKET", "audio-files")
    S3_ENDPOINT = os.getenv("S3_ENDPOINT")
    S3_REGION = os.getenv("S3_REGION")
    S3_ACCESS_KEY = os.getenv("S3_ACCESS_KEY")
    S3_SECRET_KEY = os.getenv("S3_SECRET_KEY")

    COMPLETION_API_KEY = os.getenv("COMPLETION_API_KEY") or os.getenv("LOVABLE_API_KEY")
    COMPLETION_API_URL = os.getenv("COMPLETION_API_URL", "https://ai.gateway.lovable.dev/v1/chat/completions")
    COMPLETION_MODEL = os.getenv("COMPLETION_MODEL", "google/gemini-2.5-flash")
    COMPLETION_TIMEOUT = float(os.getenv("COMPLETION_TIMEOUT", "60"))
