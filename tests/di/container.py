"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, Provider, make_async_container

from askit.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None, *extra_providers: Provider
) -> AsyncContainer:
    """Build a container that uses in-memory components unless unmocked.

    Settings are loaded from environment variables; conftest.py sets the
    test values.

    Args:
        unmock: Components to use production implementations for
        extra_providers: Additional providers, e.g. FastapiProvider for e2e tests

    Raises:
        ValueError: If ``unmock`` names an unknown component

    Examples:
        # Unit tests, everything in memory
        container = build_test_container()

        # Integration tests against PostgreSQL
        container = build_test_container(unmock={"persistence"})

        # E2E tests through the HTTP app
        container = build_test_container(None, FastapiProvider())
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*providers, *extra_providers)


def _validate_unmock(unmock: set[Component]) -> None:
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
