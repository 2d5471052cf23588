# config/resolvers.py
from pathlib import Path
from typing import Optional
from platformdirs import user_log_dir

APP = "printsafe"

def default_log_dir() -> Path:
    return Path(user_log_dir(APP))

def _resolve_log_dir(file_path: Optional[Path]) -> Path:
    """Logs go next to an explicit --log-file, otherwise to the per-user log dir."""
    if file_path:
        return Path(file_path).parent
    return default_log_dir()
