"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It picks the record store from settings, owns the store's connection
lifecycle and hands out a ready ``ProductService``.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from stockroom.application.product_service import ProductService
from stockroom.infrastructure.config import Settings

logger = logging.getLogger(__name__)


@contextmanager
def product_service(settings: Settings) -> Iterator[ProductService]:
    """Yield a service backed by the configured store, closing it on exit."""
    if settings.store == "json":
        from stockroom.infrastructure.persistence.json_product_repository import (
            JsonProductRepository,
        )

        logger.info("Using JSON store at %s", settings.data_file)
        yield ProductService(JsonProductRepository(Path(settings.data_file)))
        return

    if settings.store != "cassandra":
        raise ValueError(f"Unknown store '{settings.store}'")

    # The driver is only imported when Cassandra is actually selected.
    from stockroom.infrastructure.persistence.cassandra_product_repository import (
        CassandraProductRepository,
    )
    from stockroom.infrastructure.persistence.cassandra_session import (
        connect,
        create_schema,
    )

    cluster, session = connect(settings)
    try:
        if settings.cassandra_create_schema:
            create_schema(session, settings.cassandra_keyspace)
        repo = CassandraProductRepository(session, settings.cassandra_keyspace)
        yield ProductService(repo)
    finally:
        cluster.shutdown()
        logger.info("Cassandra connection closed")
