"""
Configurações globais do Pytest para o Catálogo de Padrões.

Fornece sessão de banco em memória já populada e um cliente HTTP
com a dependência get_db substituída.
"""

import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Adicionar src ao path para imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from padroes.database.config import Base, get_db, init_db
from padroes.database.seeds import create_tutoriais


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Sessão de banco em memória, vazia"""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def db_populado(db):
    """Sessão com os tutoriais das seeds"""
    create_tutoriais(db)
    return db


@pytest.fixture
def client(db_populado):
    from fastapi.testclient import TestClient
    from padroes.main import app

    def override_get_db():
        yield db_populado

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
