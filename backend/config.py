# backend/config.py
import os
import logging
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_DATA_DIR = "/data/files"
DEFAULT_DATA_PATH = "/data"


@dataclass(frozen=True)
class DataConfig:
    data_dir: str                  # absolute root every served path stays under
    data_path: str                 # URL prefix, no trailing slash
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("data"))


def _normalize_prefix(prefix: str) -> str:
    prefix = "/" + prefix.strip().strip("/")
    return "" if prefix == "/" else prefix


def load_config(logger: Optional[logging.Logger] = None) -> DataConfig:
    """Build DataConfig from FILE_SANDBOX / DATA_PATH."""
    data_dir = os.getenv("FILE_SANDBOX", DEFAULT_DATA_DIR)
    data_path = os.getenv("DATA_PATH", DEFAULT_DATA_PATH)
    return DataConfig(
        data_dir=os.path.abspath(data_dir),
        data_path=_normalize_prefix(data_path),
        logger=logger or logging.getLogger("data"),
    )
