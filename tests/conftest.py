"""Shared pytest fixtures.

Every test gets fresh in-memory repositories, a mapper over them and a
MagicMock logger, so tests never share state through the container
singletons.
"""

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from crm_core.application.common.repository_registry import RepositoryRegistry
from crm_core.application.cqrs.dispatcher import Dispatcher
from crm_core.application.mapping.entity_mapper import EntityMapper
from crm_core.core.config import Settings
from crm_core.core.enums import Environment
from crm_core.domain.families import FAMILY_REGISTRY
from crm_core.domain.protocols.logger_protocol import LoggerProtocol
from crm_core.infrastructure.persistence.in_memory_repository import (
    build_in_memory_repository,
)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults, independent of the process environment."""
    return Settings(environment=Environment.TESTING)


@pytest.fixture
def logger() -> MagicMock:
    """Logger mock whose bind()/with_context() return the same mock."""
    mock = MagicMock(spec=LoggerProtocol)
    mock.bind.return_value = mock
    mock.with_context.return_value = mock
    return mock


@pytest.fixture
def repositories() -> RepositoryRegistry:
    """Fresh in-memory repository for every registered family."""
    return RepositoryRegistry(
        {family.name: build_in_memory_repository(family) for family in FAMILY_REGISTRY}
    )


@pytest.fixture
def mapper(repositories: RepositoryRegistry) -> EntityMapper:
    return EntityMapper(repositories)


@pytest.fixture
def make_handler(
    repositories: RepositoryRegistry, mapper: EntityMapper, logger: MagicMock
) -> Callable[[type], Any]:
    """Build any registered handler over the test repositories."""

    def factory(handler_class: type) -> Any:
        return handler_class(repositories=repositories, mapper=mapper, logger=logger)

    return factory


@pytest.fixture
def dispatcher(
    make_handler: Callable[[type], Any],
    test_settings: Settings,
    logger: MagicMock,
) -> Dispatcher:
    return Dispatcher(
        handler_factory=make_handler,
        settings=test_settings,
        logger=logger,
    )
