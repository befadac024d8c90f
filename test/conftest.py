from datetime import datetime

import pytest

from resolvers.base import DateResolver, ResolvedDate

NOW = datetime(2026, 10, 19, 9, 0)


class FakeResolver(DateResolver):
    def __init__(self, matches):
        self._matches = matches
        self.calls = []

    def resolve(self, text: str, reference: datetime):
        self.calls.append((text, reference))
        return [ResolvedDate(t, d, c) for t, d, c in self._matches]


class FailingResolver(DateResolver):
    def resolve(self, text: str, reference: datetime):
        raise RuntimeError("locale data missing")


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fake_resolver_factory():
    def _make(*matches):
        return FakeResolver(list(matches))
    return _make


@pytest.fixture
def failing_resolver():
    return FailingResolver()
