"""
Modelos SQLAlchemy para o banco de dados
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Text, Enum
from sqlalchemy.orm import relationship
from datetime import datetime, timezone
import enum

from .config import Base

# Enums para o banco
class CategoriaPadraoEnum(enum.Enum):
    COMPORTAMENTAL = "comportamental"
    ESTRUTURAL = "estrutural"

class TipoConsideracaoEnum(enum.Enum):
    PRO = "pro"
    CONTRA = "contra"

# Modelos
class TutorialPadrao(Base):
    """Um tutorial segue o roteiro Intenção, Problema, Solução, Estrutura, Exemplos, Prós/Contras"""
    __tablename__ = "tutoriais"

    id = Column(Integer, primary_key=True, index=True)
    slug = Column(String(50), unique=True, nullable=False, index=True)
    nome = Column(String(100), nullable=False)
    categoria = Column(Enum(CategoriaPadraoEnum), nullable=False)
    intencao = Column(Text, nullable=False)
    problema = Column(Text, nullable=False)
    solucao = Column(Text, nullable=False)
    estrutura = Column(Text, nullable=False)  # diagrama ASCII
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # Relacionamentos
    consideracoes = relationship(
        "ConsideracaoPadrao",
        back_populates="tutorial",
        order_by="ConsideracaoPadrao.ordem",
        cascade="all, delete-orphan",
    )

class ConsideracaoPadrao(Base):
    __tablename__ = "consideracoes"

    id = Column(Integer, primary_key=True, index=True)
    tipo = Column(Enum(TipoConsideracaoEnum), nullable=False)
    texto = Column(Text, nullable=False)
    ordem = Column(Integer, default=0)

    # Relacionamentos
    tutorial_id = Column(Integer, ForeignKey("tutoriais.id"))
    tutorial = relationship("TutorialPadrao", back_populates="consideracoes")
