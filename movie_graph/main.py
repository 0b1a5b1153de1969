import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from movie_graph.common.config import Settings, get_settings
from movie_graph.common.driver import close_connection, open_connection
from movie_graph.common.errors import register_exception_handlers
from movie_graph.movies.routes import movies_endpoint

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Erro aqui aborta a inicialização antes de abrir a porta
        logger.info("--> Conectando ao Neo4j em %s", settings.neo4j_uri)
        app.state.driver = open_connection(
            settings.connection_config(),
            verify=settings.neo4j_verify_connectivity,
        )
        try:
            yield
        finally:
            close_connection(app.state.driver)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings

    register_exception_handlers(app)
    # Rota única, qualquer método HTTP
    app.add_route("/", movies_endpoint, include_in_schema=False)
    return app
