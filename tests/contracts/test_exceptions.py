from __future__ import annotations

import pytest

from catalogsync.contracts.exceptions import (
    AuthenticationError,
    CatalogSyncError,
    ConfigError,
    RecordNotFoundError,
    SourceError,
    StoreError,
    SyncError,
)


@pytest.mark.parametrize("error_type", [ConfigError, SourceError, AuthenticationError, StoreError, SyncError])
def test_errors_share_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, CatalogSyncError)


def test_authentication_error_is_a_source_error() -> None:
    assert issubclass(AuthenticationError, SourceError)


def test_record_not_found_carries_id() -> None:
    error = RecordNotFoundError(42)

    assert isinstance(error, StoreError)
    assert error.record_id == 42
    assert "42" in str(error)
