import logging
from typing import Any, Dict, List

from neo4j import READ_ACCESS, Driver
from neo4j.exceptions import DriverError, Neo4jError, ServiceUnavailable, SessionExpired
from pydantic import ValidationError

from movie_graph.common.errors import QueryError, RowDecodeError
from movie_graph.schemas import Movie, MovieResult

logger = logging.getLogger(__name__)

MOVIES_LIMIT = 10

MOVIES_QUERY = (
    "MATCH (movie:Movie) "
    "RETURN movie.title as title, movie.released as released "
    "LIMIT $limit"
)


def decode_row(row: Dict[str, Any]) -> MovieResult:
    """Converte uma linha do Neo4j em MovieResult, com tipos estritos."""
    try:
        movie = Movie(released=row["released"], title=row.get("title"))
    except KeyError as e:
        raise RowDecodeError(f"Campo ausente na linha: {e.args[0]!r}") from e
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise RowDecodeError(f"Tipo inesperado no(s) campo(s): {fields}") from e
    return MovieResult(movie=movie)


def fetch_movies(driver: Driver, database: str) -> List[MovieResult]:
    """
    Executa a consulta fixa de filmes e devolve os registros na ordem do banco.

    Uma sessão de leitura por chamada. O driver é compartilhado entre threads,
    a sessão não.
    """
    session = None
    try:
        try:
            session = driver.session(database=database, default_access_mode=READ_ACCESS)
            result = session.run(MOVIES_QUERY, limit=MOVIES_LIMIT)
            rows = [record.data() for record in result]
        except (ServiceUnavailable, SessionExpired) as e:
            logger.error("Neo4j indisponível: %s", e)
            raise QueryError("Banco de dados indisponível", status_code=503) from e
        except (Neo4jError, DriverError) as e:
            logger.error("Erro consultando Neo4j: %s", e)
            raise QueryError(f"Erro consultando Neo4j: {e}") from e

        movies = []
        for row in rows:
            try:
                movies.append(decode_row(row))
            except RowDecodeError as e:
                logger.error("Linha inválida %r: %s", row, e)
                raise
        return movies
    finally:
        if session is not None:
            _close_session(session)


def _close_session(session) -> None:
    # Erro ao fechar fica restrito a esta requisição
    try:
        session.close()
    except Exception:
        logger.exception("Erro ao fechar sessão Neo4j")
