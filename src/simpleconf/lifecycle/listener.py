from __future__ import annotations

import logging
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, AsyncIterator, Callable, Optional, Sequence

from simpleconf.config.models import SimpleconfConfig
from simpleconf.errors import StartupError
from simpleconf.properties.interfaces import PropertySource, PropertyStore
from simpleconf.properties.loader import load_properties
from simpleconf.properties.locations import DEFAULT_LOCATIONS, default_locations

logger = logging.getLogger(__name__)


class ApplicationPropertiesListener:
    """
    Publishes application properties when the host application starts.

    The host calls `context_initialized` once, before serving anything, with a
    context able to open resources from the application root. Any failure is
    raised back to the host so that startup stops instead of running with a
    broken configuration.
    """

    def __init__(
        self,
        locations: Optional[Sequence[PropertySource]] = None,
        store: Optional[PropertyStore] = None,
    ):
        self.locations: Sequence[PropertySource] = DEFAULT_LOCATIONS if locations is None else tuple(locations)
        self.store = store

    @classmethod
    def from_config(
        cls, config: SimpleconfConfig, store: Optional[PropertyStore] = None
    ) -> "ApplicationPropertiesListener":
        return cls(locations=default_locations(config.locations), store=store)

    def context_initialized(self, context: Optional[object]) -> None:
        try:
            load_properties(self.locations, context, self.store)
        except RuntimeError:
            logger.exception("Error during initialization")
            raise
        except Exception as e:
            logger.exception("Error during initialization")
            raise StartupError(f"Loading application properties failed: {e}") from e

    def context_destroyed(self, context: Optional[object]) -> None:
        pass

    def lifespan(self, context: Optional[object]) -> Callable[[Any], AbstractAsyncContextManager[None]]:
        """
        Build an ASGI lifespan handler, e.g. `FastAPI(lifespan=listener.lifespan(ctx))`.

        The application object passed in by the framework is ignored.
        """

        @asynccontextmanager
        async def _lifespan(app: Any) -> AsyncIterator[None]:
            self.context_initialized(context)
            try:
                yield
            finally:
                self.context_destroyed(context)

        return _lifespan
