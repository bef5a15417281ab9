"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (configure via .env or export).
Integration tests assume PostgreSQL is already running and migrated.
"""

import pytest_asyncio

from showcase.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the given
    components unmocked and yields a request-scoped container for service
    access. Each test gets a fresh container, so in-memory state never
    leaks between tests.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_cast_vote(unit_env):
            vote_service = await unit_env.get(VoteService)
            result = await vote_service.cast_vote(submission_id, voter_id)
            assert result.outcome == CastOutcome.RECORDED
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
