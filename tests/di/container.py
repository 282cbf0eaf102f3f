"""Test container with every mockable component faked unless unmocked."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from ead.config import Settings
from ead.util.di import PROVIDERS, Component, get_provider, is_mockable


def build_test_container(
    unmock: set[Component] | None = None, settings: Settings | None = None
) -> AsyncContainer:
    """Build a container for tests.

    Args:
        unmock: Components to run with their production implementation
        settings: Settings to serve; read from the environment when omitted

    Returns:
        Container usable directly or behind ``create_app``

    Raises:
        ValueError: For unknown components or unmet ``__depends_on__``

    Examples:
        # Unit and API tests - in-memory backend and notes
        container = build_test_container()

        # Notes store on a real database, backend still faked
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = [
        get_provider(
            base,
            use_mock=is_mockable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    return make_async_container(
        *providers,
        FastapiProvider(),
        context={Settings: settings or Settings(environment="test")},
    )


def _validate_unmock(unmock: set[Component]) -> None:
    mockable = [base for base in PROVIDERS if is_mockable(base)]
    known = {base.__mock_component__ for base in mockable}

    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    for base in mockable:
        if base.__mock_component__ in unmock:
            missing = base.__depends_on__ - unmock
            if missing:
                raise ValueError(
                    f"Component '{base.__mock_component__}' requires "
                    f"{set(missing)} to be unmocked"
                )
