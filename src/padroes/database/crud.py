from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Dict, List, Optional

from .models import (
    TutorialPadrao, ConsideracaoPadrao, CategoriaPadraoEnum, TipoConsideracaoEnum
)

class BaseRepository:
    """Repositório base com criação e contagem"""

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    def create(self, obj):
        """Cria um novo registro"""
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def count(self) -> int:
        return self.db.query(self.model).count()

class TutorialRepository(BaseRepository):
    """Repositório para tutoriais de padrões"""

    def __init__(self, db: Session):
        super().__init__(db, TutorialPadrao)

    def get_by_slug(self, slug: str) -> Optional[TutorialPadrao]:
        """Busca tutorial pelo slug"""
        return self.db.query(TutorialPadrao).filter(TutorialPadrao.slug == slug).first()

    def get_by_categoria(self, categoria: CategoriaPadraoEnum) -> List[TutorialPadrao]:
        """Busca tutoriais por categoria"""
        return self.db.query(TutorialPadrao).filter(
            TutorialPadrao.categoria == categoria
        ).order_by(TutorialPadrao.id).all()

    def listar(self, categoria: Optional[CategoriaPadraoEnum] = None) -> List[TutorialPadrao]:
        """Lista tutoriais com filtro opcional de categoria"""
        if categoria:
            return self.get_by_categoria(categoria)
        return self.db.query(TutorialPadrao).order_by(TutorialPadrao.id).all()

    def contar_por_categoria(self) -> Dict[str, int]:
        linhas = self.db.query(
            TutorialPadrao.categoria, func.count(TutorialPadrao.id)
        ).group_by(TutorialPadrao.categoria).all()
        return {categoria.value: total for categoria, total in linhas}

    def create_tutorial(self, slug: str, nome: str, categoria: CategoriaPadraoEnum,
                        intencao: str, problema: str, solucao: str, estrutura: str,
                        pros: List[str] = None, contras: List[str] = None) -> TutorialPadrao:
        """Cria tutorial com seus prós e contras na ordem recebida"""
        tutorial = TutorialPadrao(
            slug=slug,
            nome=nome,
            categoria=categoria,
            intencao=intencao,
            problema=problema,
            solucao=solucao,
            estrutura=estrutura,
        )
        ordem = 0
        for tipo, textos in ((TipoConsideracaoEnum.PRO, pros or []),
                             (TipoConsideracaoEnum.CONTRA, contras or [])):
            for texto in textos:
                tutorial.consideracoes.append(ConsideracaoPadrao(tipo=tipo, texto=texto, ordem=ordem))
                ordem += 1
        return self.create(tutorial)

class ConsideracaoRepository(BaseRepository):
    """Repositório para prós e contras"""

    def __init__(self, db: Session):
        super().__init__(db, ConsideracaoPadrao)

    def contar_por_tipo(self) -> Dict[str, int]:
        linhas = self.db.query(
            ConsideracaoPadrao.tipo, func.count(ConsideracaoPadrao.id)
        ).group_by(ConsideracaoPadrao.tipo).all()
        return {tipo.value: total for tipo, total in linhas}
