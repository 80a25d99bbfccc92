"""Cassandra cluster connection and schema bootstrap.

The composition root calls ``connect`` once at process start and shuts the
returned cluster down on exit; the session is shared by every request.
"""

from __future__ import annotations

import logging

from cassandra.auth import PlainTextAuthProvider
from cassandra.cluster import EXEC_PROFILE_DEFAULT, Cluster, ExecutionProfile, Session
from cassandra.policies import DCAwareRoundRobinPolicy

from stockroom.infrastructure.config import Settings

logger = logging.getLogger(__name__)

TABLE = "products"

# (name, CQL type); quantity is a 64-bit bigint
COLUMNS = (
    ("id", "uuid"),
    ("name", "text"),
    ("price", "double"),
    ("quantity", "bigint"),
)


def connect(settings: Settings) -> tuple[Cluster, Session]:
    """Open a cluster and a session using the Cassandra settings."""
    auth_provider = None
    if settings.cassandra_username:
        auth_provider = PlainTextAuthProvider(
            username=settings.cassandra_username,
            password=settings.cassandra_password,
        )

    profile = ExecutionProfile(
        load_balancing_policy=DCAwareRoundRobinPolicy(
            local_dc=settings.cassandra_local_dc
        ),
    )
    cluster = Cluster(
        contact_points=settings.cassandra_contact_points,
        port=settings.cassandra_port,
        auth_provider=auth_provider,
        execution_profiles={EXEC_PROFILE_DEFAULT: profile},
    )
    session = cluster.connect()
    logger.info(
        "Connected to Cassandra at %s:%d",
        ",".join(settings.cassandra_contact_points),
        settings.cassandra_port,
    )
    return cluster, session


def create_schema(session: Session, keyspace: str, replication_factor: int = 1) -> None:
    """Create the keyspace and products table when they do not exist yet."""
    session.execute(
        f"CREATE KEYSPACE IF NOT EXISTS {keyspace} WITH replication = "
        f"{{'class': 'SimpleStrategy', 'replication_factor': {replication_factor}}}"
    )
    columns = ", ".join(f"{name} {cql_type}" for name, cql_type in COLUMNS)
    session.execute(
        f"CREATE TABLE IF NOT EXISTS {keyspace}.{TABLE} ({columns}, PRIMARY KEY (id))"
    )
    logger.info("Schema %s.%s is in place", keyspace, TABLE)
