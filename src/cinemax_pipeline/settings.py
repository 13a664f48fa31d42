from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # ---- Data roots (handy for pipelines/scripts) ----
    project_root: Path = Path(".").resolve()
    data_root: Path = Path("data")
    raw_dir: Path = data_root / "raw"
    processed_dir: Path = data_root / "processed"

    # ----- Datasets -----
    train_corpus: Path = raw_dir / "train_data.txt"
    test_corpus: Path = raw_dir / "test_data.txt"
    full_snapshot: Path = processed_dir / "full-movie-dataset.json"
    sample_snapshot: Path = processed_dir / "sample-movie-dataset.json"

    # front-end source file holding `export const movies = [...]`
    movies_source: Path = Path("src") / "data" / "movies.js"

    # ---- corpus format ----
    corpus_separator: str = " ::: "

    # ---- batch limits ----
    sample_training_limit: int = 1000
    sample_test_limit: int = 100
    max_integrated_records: int = 1000

    # ---- app/runtime ----
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ---- reproducibility ----
    random_seed: Optional[int] = None  # None keeps synthesized fields non-deterministic

    model_config = SettingsConfigDict(
        env_file = ".env",
        env_prefix="APP_",      # APP_LOG_LEVEL, APP_RANDOM_SEED, etc.
        extra = "ignore"
    )


def get_settings() -> Settings:
    """Singleton accessor to avoid reparsing .env on every import."""
    return Settings()
