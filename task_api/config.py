from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

APP_NAME = os.getenv("APP_NAME", "Task Manager API")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5223"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Vite dev, Create React App, Vite alternative and Vite preview ports
_default_origins = (
    "http://localhost:5173,"
    "http://localhost:3000,"
    "http://localhost:5174,"
    "http://localhost:4173"
)
_cors_origins = os.getenv("CORS_ORIGINS", _default_origins)
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]


def docs_enabled() -> bool:
    return ENVIRONMENT.lower() == "development"
