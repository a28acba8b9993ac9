from .base import (lifespan, register_shutdown_handler,
                   register_startup_handler)

__all__ = [
    "lifespan",
    "register_startup_handler",
    "register_shutdown_handler",
]
