from fastapi import FastAPI

from .. import __version__
from ..storage import Store
from .routes import router


def create_app(store: Store) -> FastAPI:
    """
    Build the HTTP app around a store handle.

    The store should be thread-safe (a GuardedStore): requests are served
    from a thread pool and reach it concurrently.
    """
    # Every path is a key, so the docs routes are disabled
    app = FastAPI(
        title="layerkv",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.store = store
    app.include_router(router)
    return app
