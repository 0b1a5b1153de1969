import uvicorn

from movie_graph.common.config import get_settings
from movie_graph.common.logger import setup_logger
from movie_graph.main import create_app


def main():
    settings = get_settings()
    setup_logger(settings.log_level, settings.log_dir)

    # lifespan="on": falha no startup encerra o processo sem abrir a porta
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        lifespan="on",
        log_config=None,
    )


if __name__ == "__main__":
    main()
