"""Fixtures and configuration for pytest."""

import pytest

from go2ts import Converter
from go2ts.types import STRING, GoType, field, named, struct_of


@pytest.fixture
def converter() -> Converter:
    """Fixture providing a freshly seeded converter."""
    return Converter()


@pytest.fixture
def user() -> GoType:
    """Fixture providing `type User struct { Name string }`."""
    return named("User", struct_of(field("Name", STRING)), pkg_path="example.com/app")


@pytest.fixture
def nested(user: GoType) -> GoType:
    """Fixture providing `type Nested struct { Owner User }`."""
    return named("Nested", struct_of(field("Owner", user)), pkg_path="example.com/app")
