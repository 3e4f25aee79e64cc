"""
Configuração do banco de dados SQLite
"""
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from dotenv import load_dotenv

load_dotenv()

# Configuração do banco
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    "sqlite:///./padroes.db"
)

# Para SQLite, adicionar configurações específicas
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    """Dependency para obter sessão do banco"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind=None):
    """Inicializa o banco criando todas as tabelas"""
    from . import models  # noqa: F401  registra as tabelas no metadata
    Base.metadata.create_all(bind=bind or engine)
