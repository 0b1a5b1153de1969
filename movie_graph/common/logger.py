import gzip
import logging
import os
import shutil
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def gz_namer(name):
    return name + ".gz"


def gz_rotator(source, dest):
    with open(source, "rb") as f_in:
        with gzip.open(dest, "wb") as f_out:
            shutil.copyfileobj(f_in, f_out)
    os.remove(source)


def setup_logger(level: str = "INFO", log_dir: Optional[str] = None, log_filename: str = "movie_graph.log") -> None:
    """Configura o logger raiz: console sempre, arquivo rotativo se `log_dir` for definido."""
    log_formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Evita handlers duplicados se chamado mais de uma vez
    for handler in list(root_logger.handlers):
        if getattr(handler, "_movie_graph", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    console_handler._movie_graph = True
    root_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = TimedRotatingFileHandler(
            log_path / log_filename,
            when="midnight",
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setFormatter(log_formatter)
        file_handler.rotator = gz_rotator
        file_handler.namer = gz_namer
        file_handler._movie_graph = True
        root_logger.addHandler(file_handler)
        logging.info("Log em arquivo habilitado: %s", log_path / log_filename)
