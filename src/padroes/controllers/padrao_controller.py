"""
Controller para consulta dos tutoriais (padrão MVC)
Catálogo de Padrões de Projeto
"""
from fastapi import APIRouter, HTTPException, Depends, status, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from typing import List, Optional, Dict
from sqlalchemy.orm import Session

from ..database.config import get_db
from ..patterns.business_object import CatalogoBO
from ..patterns.catalogo import PadraoNaoEncontrado


class TutorialResponse(BaseModel):
    """Schema de resposta para tutorial"""
    slug: str
    nome: str
    categoria: str
    intencao: str
    problema: str
    solucao: str
    estrutura: str
    pros: List[str] = []
    contras: List[str] = []
    tem_demonstracao: bool

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "slug": "observer",
                "nome": "Observer",
                "categoria": "comportamental",
                "intencao": "Define um mecanismo de assinatura...",
                "problema": "...",
                "solucao": "...",
                "estrutura": "...",
                "pros": ["Novos assinantes sem alterar a agência"],
                "contras": [],
                "tem_demonstracao": True
            }
        }


class PadraoController:
    """Controller para os tutoriais de padrões"""

    def __init__(self):
        self.router = APIRouter(prefix="/padroes", tags=["Padrões"])
        self._setup_routes()

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.get("/", response_model=List[TutorialResponse])
        async def listar_padroes(
            categoria: Optional[str] = Query(None, description="comportamental ou estrutural"),
            db: Session = Depends(get_db)
        ):
            """Lista os tutoriais, opcionalmente filtrando por categoria"""
            try:
                return CatalogoBO(db).listar_tutoriais_dict(categoria)
            except ValueError as e:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=str(e)
                )
            except Exception as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Erro ao listar padrões: {str(e)}"
                )

        @self.router.get("/categorias", response_model=Dict[str, List[str]])
        async def listar_categorias(db: Session = Depends(get_db)):
            """Agrupa os slugs por categoria"""
            try:
                return CatalogoBO(db).listar_categorias()
            except Exception as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Erro ao listar categorias: {str(e)}"
                )

        @self.router.get("/{slug}", response_model=TutorialResponse)
        async def obter_padrao(slug: str, db: Session = Depends(get_db)):
            """Obtém o tutorial completo de um padrão"""
            try:
                return CatalogoBO(db).obter_tutorial_dict(slug)
            except PadraoNaoEncontrado as e:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=str(e)
                )
            except Exception as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Erro ao obter padrão: {str(e)}"
                )

        @self.router.get("/{slug}/markdown", response_class=PlainTextResponse)
        async def obter_markdown(slug: str, db: Session = Depends(get_db)):
            """Renderiza o tutorial como documento Markdown"""
            try:
                markdown = CatalogoBO(db).gerar_markdown(slug)
                return PlainTextResponse(markdown, media_type="text/markdown; charset=utf-8")
            except PadraoNaoEncontrado as e:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=str(e)
                )
            except Exception as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Erro ao gerar markdown: {str(e)}"
                )
