from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from feistellab.cipher.key_schedule import MAX_ROUNDS


class Settings(BaseModel):
    # Network
    default_rounds: int = Field(default=16, ge=0, le=MAX_ROUNDS)
    round_function: str = Field(default="prf.sha256", description="Round function component id")
    key_schedule: str = Field(default="ks.popcount_rotate", description="Key schedule component id")

    # Evaluation
    roundtrip_vectors: int = Field(default=1000, ge=1)
    avalanche_trials: int = Field(default=200, ge=1)

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Logging
    log_level: str = Field(default="INFO")

    # Paths
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_rounds=int(os.getenv("FEISTEL_ROUNDS", "16")),
        round_function=os.getenv("FEISTEL_ROUND_FUNCTION", "prf.sha256"),
        key_schedule=os.getenv("FEISTEL_KEY_SCHEDULE", "ks.popcount_rotate"),
        roundtrip_vectors=int(os.getenv("ROUNDTRIP_VECTORS", "1000")),
        avalanche_trials=int(os.getenv("AVALANCHE_TRIALS", "200")),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        runs_dir=os.getenv("RUNS_DIR", "runs"),
    )
