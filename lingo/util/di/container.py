"""Dependency injection container for the API process."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from lingo.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation, so
    repositories use Postgres. Settings come from the environment.
    """
    providers = [get_provider(base, use_mock=False) for base in PROVIDERS]
    logfire.debug(
        "Building DI container", providers=[p.__name__ for p in providers]
    )
    return make_async_container(*(p() for p in providers), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app.

    Each request opens a REQUEST scope, so one DB session and one set of
    services serve the whole request. The container is stored on
    app.state.dishka_container and closed by the app lifespan.
    """
    setup_dishka(container, app)
