from __future__ import annotations

import random

from dependency_injector import containers, providers

from gerr.config import Settings
from gerr.demo.fake_api import FakeApi


class AppContainer(containers.DeclarativeContainer):
    """Dependency Injector container for the demo CLI."""

    settings = providers.Singleton(Settings)
    container_config = providers.Configuration()

    rng = providers.Singleton(random.Random)

    fake_api = providers.Factory(
        FakeApi,
        rng=rng,
        rand_max=container_config.fake_api_rand_max.as_int(),
    )


def build_container(settings: Settings) -> AppContainer:
    """Create the container and load *settings* into its configuration."""
    container = AppContainer()
    container.settings.override(providers.Object(settings))
    container.container_config.from_pydantic(settings)  # pyright: ignore
    return container
