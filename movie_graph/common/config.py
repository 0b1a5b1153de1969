from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings

load_dotenv()


class ConnectionConfig(BaseModel):
    """Parâmetros de conexão com o Neo4j, imutáveis depois de criados."""

    model_config = ConfigDict(frozen=True)

    uri: str
    username: str
    password: str
    database: str


class Settings(BaseSettings):
    app_name: str = "Movie Graph API"

    # Neo4j
    neo4j_uri: str = "neo4j://neo4j:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "testing"
    neo4j_database: str = "neo4j"
    neo4j_verify_connectivity: bool = False

    # Servidor HTTP
    host: str = "0.0.0.0"
    port: int = 8080

    # Logs
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    def connection_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            uri=self.neo4j_uri,
            username=self.neo4j_user,
            password=self.neo4j_password,
            database=self.neo4j_database,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
