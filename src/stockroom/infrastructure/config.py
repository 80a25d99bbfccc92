"""Configuration management.

``Settings`` is read from environment variables, with a default for every
field. There is no module-level instance: the app factory and the CLI call
``Settings.from_env()`` when they start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # "cassandra" in production, "json" for a local file-backed store
    store: str = "cassandra"
    data_file: str = "data/products.json"

    cassandra_contact_points: list[str] = field(default_factory=lambda: ["127.0.0.1"])
    cassandra_port: int = 9042
    cassandra_keyspace: str = "inventory"
    cassandra_local_dc: str = "datacenter1"
    cassandra_username: str = ""
    cassandra_password: str = ""
    cassandra_create_schema: bool = True

    seed_on_startup: bool = True
    seed_count: int = 10

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        contact_points = os.getenv("CASSANDRA_CONTACT_POINTS", "127.0.0.1")
        return cls(
            store=os.getenv("STOCKROOM_STORE", "cassandra").lower(),
            data_file=os.getenv("STOCKROOM_DATA_FILE", "data/products.json"),
            cassandra_contact_points=[
                host.strip() for host in contact_points.split(",") if host.strip()
            ],
            cassandra_port=int(os.getenv("CASSANDRA_PORT", "9042")),
            cassandra_keyspace=os.getenv("CASSANDRA_KEYSPACE", "inventory"),
            cassandra_local_dc=os.getenv("CASSANDRA_LOCAL_DC", "datacenter1"),
            cassandra_username=os.getenv("CASSANDRA_USERNAME", ""),
            cassandra_password=os.getenv("CASSANDRA_PASSWORD", ""),
            cassandra_create_schema=_flag("CASSANDRA_CREATE_SCHEMA", "true"),
            seed_on_startup=_flag("STOCKROOM_SEED_ON_STARTUP", "true"),
            seed_count=int(os.getenv("STOCKROOM_SEED_COUNT", "10")),
            host=os.getenv("STOCKROOM_HOST", "0.0.0.0"),
            port=int(os.getenv("STOCKROOM_PORT", "8080")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
