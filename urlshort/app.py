import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.responses import RedirectResponse
from .chain import build_chain
from .config import Settings
from .resolver import Redirect, ResolverStage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the redirect chain from the environment unless one was passed in."""
    #---- Startup ----
    if not hasattr(app.state, 'chain'):
        app.state.chain = build_chain(Settings.from_env())
    yield


def create_app(chain: ResolverStage | None = None) -> FastAPI:
    application = FastAPI(lifespan=lifespan)
    if chain is not None:
        application.state.chain = chain

    async def redirect(request: Request):
        path = request.url.path
        outcome = request.app.state.chain.serve(path)

        if isinstance(outcome, Redirect):
            logger.debug("redirect %s -> %s", path, outcome.url)
            return RedirectResponse(url=outcome.url, status_code=outcome.status)

        return Response(
            content=outcome.content,
            status_code=outcome.status_code,
            media_type=outcome.media_type,
        )

    # methods=None: every method, including TRACE and custom ones, reaches the chain
    application.add_route("/{path:path}", redirect, methods=None, include_in_schema=False)

    return application


app = create_app()
