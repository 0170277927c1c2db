from datetime import datetime, timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock

from reset_password.app.services.config import ResetRequestStoreConfig
from reset_password.app.services.token_generator import TokenGenerator

NOW = datetime(2024, 3, 1, 12, 0, 0)


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.reset_requests = MagicMock()
    uow.reset_requests.save = AsyncMock(side_effect=lambda request: request)
    uow.reset_requests.find_by_selector = AsyncMock(return_value=None)
    uow.reset_requests.find_most_recent_non_expired = AsyncMock(return_value=None)
    uow.reset_requests.count_non_expired = AsyncMock(return_value=0)
    uow.reset_requests.delete = AsyncMock(return_value=True)
    uow.reset_requests.delete_where_expired = AsyncMock(return_value=0)
    uow.reset_requests.delete_by_user_id = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def store_config():
    return ResetRequestStoreConfig(
        token_lifetime=timedelta(hours=1),
        signing_key="unit-test-key",
        request_throttle_limit=timedelta(minutes=15),
    )


@pytest.fixture
def token_generator(store_config):
    return TokenGenerator(store_config.signing_key)


@pytest.fixture
def mock_store(store_config, token_generator):
    """Mock ResetRequestStore for use case tests"""
    store = MagicMock()
    store.config = store_config
    store.token_generator = token_generator
    store.now = MagicMock(return_value=NOW)
    store.create = AsyncMock()
    store.consume = AsyncMock()
    store.most_recent_non_expired_for = AsyncMock(return_value=None)
    store.remove_expired = AsyncMock(return_value=0)
    return store
