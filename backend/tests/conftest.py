"""
Configuration partagée pour tous les tests API.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL :
les routers reçoivent une session MagicMock et les services sont patchés test par test.
"""

import pytest
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

from app.database import get_db
from app.main import app


@pytest.fixture
def mock_db():
    """Session SQLAlchemy factice injectée dans les routers."""
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
