from .base import BaseFixtureError
from .fixtures import (FixtureDefinitionError, PersistenceNotConfiguredError,
                       ProviderNotFoundError, ReferenceNotFoundError,
                       UnknownLoaderError)

__all__ = [
    # Base
    "BaseFixtureError",
    # Fixtures
    "UnknownLoaderError",
    "PersistenceNotConfiguredError",
    "FixtureDefinitionError",
    "ReferenceNotFoundError",
    "ProviderNotFoundError",
]
