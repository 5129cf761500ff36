from __future__ import annotations

import logging
from typing import Dict, List

from configstore import LoadGate, configclass, env_field, load_once, print_config
from configstore.logging import LoggingSettings, init_logging


@configclass
class ServiceConfig:
    port: int = env_field("SERVICE_PORT", default="8080")
    debug: bool = env_field("SERVICE_DEBUG", default="false")
    database_url: str = env_field("DATABASE_URL", default="postgres://localhost/service")
    database_password: str = env_field("DATABASE_PASSWORD", secret=True)
    allowed_hosts: List[str] = env_field("ALLOWED_HOSTS", default="localhost,127.0.0.1")
    worker_weights: Dict[str, int] = env_field("WORKER_WEIGHTS", default="fast=3,slow=1")


CONFIG = ServiceConfig()
_CONFIG_GATE = LoadGate()


def get_config() -> ServiceConfig:
    load_once(CONFIG, False, _CONFIG_GATE)
    return CONFIG


def main() -> None:
    init_logging(LoggingSettings(level="DEBUG"))
    logger = logging.getLogger("configstore.example")

    config = get_config()
    logger.info("Config loaded port=%s debug=%s", config.port, config.debug)
    print_config(config)


if __name__ == "__main__":
    main()
