from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse


class MovieGraphError(Exception):
    """Base de todos os erros da aplicação."""


class ConfigurationError(MovieGraphError):
    """Parâmetros de conexão inválidos. Fatal na inicialização."""


class DatabaseUnavailableError(MovieGraphError):
    """Banco não respondeu à verificação de conectividade na inicialização."""


class QueryError(MovieGraphError):
    """Falha ao executar a consulta Cypher de uma requisição."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message)
        self.status_code = status_code


class RowDecodeError(MovieGraphError):
    """Linha do resultado com campo ausente ou de tipo inesperado."""


class SerializationError(MovieGraphError):
    """Falha ao converter os registros em JSON."""


# -------------------------
# HANDLERS HTTP
# -------------------------
async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


async def row_decode_error_handler(request: Request, exc: RowDecodeError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"detail": str(exc)})


async def serialization_error_handler(request: Request, exc: SerializationError) -> Response:
    # Corpo vazio, só o status
    return Response(status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QueryError, query_error_handler)
    app.add_exception_handler(RowDecodeError, row_decode_error_handler)
    app.add_exception_handler(SerializationError, serialization_error_handler)
