import logging

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from movie_graph.common.errors import SerializationError
from movie_graph.movies.service import fetch_movies

logger = logging.getLogger(__name__)


def list_movies(request: Request) -> Response:
    driver = request.app.state.driver
    settings = request.app.state.settings

    movies = fetch_movies(driver, settings.neo4j_database)

    try:
        payload = [movie.model_dump(exclude_none=True) for movie in movies]
        return JSONResponse(content=payload)
    except (TypeError, ValueError) as e:
        logger.error("Erro serializando filmes: %s", e)
        raise SerializationError(str(e)) from e


class MoviesEndpoint:
    """
    Endpoint ASGI da rota "/".

    Registrado como app ASGI (e não como função) o Route fica sem lista de
    métodos e aceita qualquer um, inclusive TRACE e métodos de extensão.
    """

    async def __call__(self, scope, receive, send):
        request = Request(scope, receive)
        # Sessão do Neo4j é bloqueante: roda no threadpool, uma thread por requisição
        response = await run_in_threadpool(list_movies, request)
        await response(scope, receive, send)


movies_endpoint = MoviesEndpoint()
