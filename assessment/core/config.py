import os
from pathlib import Path
from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_PROJECT_ENV_PATH = _PROJECT_ROOT / ".env"
load_dotenv(dotenv_path=_PROJECT_ENV_PATH, override=False)


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


EVALUATION_DELAY_SEC = max(0.0, _env_float("EVALUATION_DELAY_SEC", 2.0))  # simulated evaluation latency
EVALUATION_TIMEOUT_SEC = max(0.1, _env_float("EVALUATION_TIMEOUT_SEC", 10.0))
SESSION_CLEANUP_TTL_SEC = max(60, int(_env_float("SESSION_CLEANUP_TTL_SEC", 1800)))
SESSION_CLEANUP_INTERVAL_SEC = max(30, int(_env_float("SESSION_CLEANUP_INTERVAL_SEC", 120)))
CORS_ALLOW_ORIGINS = str(os.getenv("CORS_ALLOW_ORIGINS") or "").strip()
