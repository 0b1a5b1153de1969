import logging

from neo4j import Driver, GraphDatabase
from neo4j.exceptions import ConfigurationError as Neo4jConfigurationError
from neo4j.exceptions import DriverError, Neo4jError

from movie_graph.common.config import ConnectionConfig
from movie_graph.common.errors import ConfigurationError, DatabaseUnavailableError

logger = logging.getLogger(__name__)


def open_connection(config: ConnectionConfig, verify: bool = False) -> Driver:
    """
    Cria o driver do Neo4j a partir da configuração.

    O driver não abre conexão aqui: falhas de rede só aparecem na primeira
    sessão, a não ser que `verify` peça a verificação imediata.
    """
    try:
        driver = GraphDatabase.driver(
            config.uri,
            auth=(config.username, config.password),
        )
    except (Neo4jConfigurationError, ValueError) as e:
        logger.error("Configuração do Neo4j inválida (%s): %s", config.uri, e)
        raise ConfigurationError(f"URI do Neo4j inválida: {config.uri!r}") from e

    if verify:
        try:
            driver.verify_connectivity()
        except (DriverError, Neo4jError) as e:
            logger.error("Neo4j indisponível em %s: %s", config.uri, e)
            close_connection(driver)
            raise DatabaseUnavailableError(f"Neo4j indisponível em {config.uri!r}") from e

    logger.info("Driver Neo4j criado para %s (database=%s)", config.uri, config.database)
    return driver


def close_connection(driver: Driver) -> None:
    # Falha ao fechar não derruba o processo
    try:
        driver.close()
    except Exception:
        logger.exception("Erro ao fechar o driver Neo4j")
    else:
        logger.info("Driver Neo4j fechado.")
