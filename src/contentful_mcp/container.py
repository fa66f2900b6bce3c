"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management. The content store
handle is the only process-wide state; everything else is a stateless
service bound to it.

Usage::

    from contentful_mcp.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "space_id": "abc123",
        "access_token": "...",
        "environment": "master",
        "host": "cdn.contentful.com",
        "timeout": 30.0,
    })

    resolvers = container.resolvers()
    search = container.search()

    # In tests, override any provider:
    container.content_store.override(providers.Object(fake_store))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

from contentful_mcp.application.query import ContentResolvers
from contentful_mcp.application.search import SearchAggregator
from contentful_mcp.application.stats import ContentStatistics
from contentful_mcp.infrastructure.contentful import acquire_content_store

logger = logging.getLogger(__name__)


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the Contentful MCP application.

    - ``content_store``: Contentful client, or the null store
    - ``resolvers``: per-content-type query resolvers
    - ``search``: cross-type search aggregator
    - ``statistics``: count overview
    """

    config = providers.Configuration()

    content_store = providers.Singleton(
        acquire_content_store,
        space_id=config.space_id,
        access_token=config.access_token,
        environment=config.environment,
        host=config.host,
        timeout=config.timeout,
        locale=config.locale,
    )

    resolvers = providers.Singleton(
        ContentResolvers.from_store,
        store=content_store,
    )

    search = providers.Singleton(
        SearchAggregator,
        resolvers=resolvers,
    )

    statistics = providers.Singleton(
        ContentStatistics,
        resolvers=resolvers,
    )


__all__ = ["ApplicationContainer"]
