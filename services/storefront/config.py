import os
from dataclasses import dataclass


def _flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class StorefrontConfig:
    catalog_api_url: str = "http://localhost:5000"
    timeout: float = 10.0
    verbose: bool = False
    quiet: bool = False
    log_file: str | None = None


def load_config() -> StorefrontConfig:
    return StorefrontConfig(
        catalog_api_url=os.environ.get("CATALOG_API_URL", "http://localhost:5000").rstrip("/"),
        timeout=float(os.environ.get("CATALOG_TIMEOUT", "10.0")),
        verbose=_flag("VERBOSE"),
        quiet=_flag("QUIET"),
        log_file=os.environ.get("LOG_FILE") or None,
    )
