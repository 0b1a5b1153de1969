"""
Fixtures compartilhadas.

O driver do Neo4j é sempre um MagicMock: nenhum teste precisa de banco.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from movie_graph.common.config import Settings
from movie_graph.main import create_app


class FakeRecord:
    """Imita neo4j.Record só no que o serviço usa: data()."""

    def __init__(self, **fields):
        self._fields = fields

    def data(self):
        return dict(self._fields)


def _make_rows(*movies):
    return [FakeRecord(title=title, released=released) for title, released in movies]


@pytest.fixture
def settings():
    return Settings(
        neo4j_uri="neo4j://localhost:7687",
        neo4j_user="neo4j",
        neo4j_password="secret",
        neo4j_database="movies",
    )


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.run.return_value = []
    return session


@pytest.fixture
def mock_driver(mock_session):
    driver = MagicMock()
    driver.session.return_value = mock_session
    return driver


@pytest.fixture
def client(settings, mock_driver):
    # Sem "with": o lifespan não roda e o driver real nunca é criado
    app = create_app(settings)
    app.state.driver = mock_driver
    return TestClient(app)


@pytest.fixture
def make_rows():
    return _make_rows
