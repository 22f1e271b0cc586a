import os

from team_balance import Config as BalanceConfig
from team_balance import FilterPolicy, SelectionMode

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _load_env() -> None:
    candidates = [
        os.path.join(BASE_DIR, ".env"),
        os.path.join(BASE_DIR, "backend", ".env"),
    ]
    for path in candidates:
        if not os.path.exists(path):
            continue
        with open(path, "r", encoding="utf-8") as handle:
            for raw in handle:
                line = raw.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"').strip("'")
                if key and key not in os.environ:
                    os.environ[key] = value


_load_env()


class Config:
    RANK_API_BASE_URL = os.getenv("RANK_API_BASE_URL", "http://localhost:3001")
    RANK_API_KEY = os.getenv("RANK_API_KEY", "")
    RANK_API_TIMEOUT = float(os.getenv("RANK_API_TIMEOUT", "5"))
    BALANCE_MAX_POWER_DIFFERENCE = float(os.getenv("BALANCE_MAX_POWER_DIFFERENCE", "2"))
    BALANCE_DIVISION_BONUS = float(os.getenv("BALANCE_DIVISION_BONUS", "1"))
    BALANCE_FILTER_POLICY = os.getenv("BALANCE_FILTER_POLICY", FilterPolicy.STRICT.value)
    BALANCE_SELECTION_MODE = os.getenv("BALANCE_SELECTION_MODE", SelectionMode.SEEDED.value)
    BALANCE_MAX_PARTICIPANTS = int(os.getenv("BALANCE_MAX_PARTICIPANTS", "20"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def balance_config(settings=Config) -> BalanceConfig:
    return BalanceConfig(
        division_bonus=settings.BALANCE_DIVISION_BONUS,
        max_power_difference=settings.BALANCE_MAX_POWER_DIFFERENCE,
        filter_policy=FilterPolicy(settings.BALANCE_FILTER_POLICY.lower()),
        selection_mode=SelectionMode(settings.BALANCE_SELECTION_MODE.lower()),
        max_participants=settings.BALANCE_MAX_PARTICIPANTS,
    )
