"""
Shared test fixtures and configuration for entire test suite.

Provides: sample legal diagrams, a controllable clock, API test client
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from legal_diagrams.api.deps import get_rate_limiter, get_service_cache
from legal_diagrams.core.security import RateLimiter


PERSONS_DIAGRAM = """graph TD
    subgraph persons
        p1[John Smith]:::person
        p2[Jane Doe]:::person
    end

    subgraph organisations
        org1[Acme Ltd]:::organisation
    end

    subgraph cases
        c1[Smith v Acme]:::case
    end

    p1 -->|employed by| org1
    p1 -->|plaintiff in| c1

    classDef person fill:#22C55E,stroke:#333,stroke-width:2px,color:#fff
    classDef organisation fill:#0a7ea4,stroke:#333,stroke-width:2px,color:#fff
"""

EVENTS_DIAGRAM = """graph LR
    subgraph persons
        p9[Mallory Jones]:::person
    end

    subgraph events
        e1[Hearing 2021-03-04]:::event
    end

    subgraph locations
        loc1[High Court London]:::location
    end

    p9 -->|attended| e1
    e1 -->|held at| loc1
    p1 -->|employed by| org1

    classDef person fill:#22C55E,stroke:#333,stroke-width:2px,color:#fff
    classDef event fill:#EF4444,stroke:#333,stroke-width:2px,color:#fff
"""


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.current = start

    def __call__(self) -> float:
        return self.current

    def advance(self, seconds: float) -> None:
        self.current += seconds


@pytest.fixture
def persons_diagram() -> str:
    """Valid diagram with persons, organisations and cases."""
    return PERSONS_DIAGRAM


@pytest.fixture
def events_diagram() -> str:
    """Valid diagram sharing the persons group name with persons_diagram."""
    return EVENTS_DIAGRAM


@pytest.fixture
def fake_clock() -> FakeClock:
    """Controllable clock starting at t=1000s."""
    return FakeClock()


@pytest.fixture
def rate_limiter(fake_clock: FakeClock) -> RateLimiter:
    """Rate limiter driven by the fake clock."""
    return RateLimiter(clock=fake_clock)


@pytest.fixture
def client(rate_limiter: RateLimiter):
    """
    Create API test client with a fresh service cache and fake-clock limiter.

    Yields:
        TestClient: Client bound to a newly created app
    """
    from legal_diagrams.main import create_app

    get_service_cache().clear()
    app = create_app()
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    yield TestClient(app)

    app.dependency_overrides.clear()
    get_service_cache().clear()
