"""
Controller para executar as demonstrações (padrão MVC)
Catálogo de Padrões de Projeto
"""
from fastapi import APIRouter, HTTPException, Depends, status
from pydantic import BaseModel
from typing import List
from sqlalchemy.orm import Session

from ..database.config import get_db
from ..patterns.business_object import CatalogoBO
from ..patterns.catalogo import PadraoNaoEncontrado


class DemonstracaoResponse(BaseModel):
    """Schema com a saída de console de uma demonstração"""
    padrao: str
    saida: List[str]


class DemoController:
    """Controller para as demonstrações dos padrões"""

    def __init__(self):
        self.router = APIRouter(prefix="/demo", tags=["Demonstrações"])
        self._setup_routes()

    def _setup_routes(self):
        """Configura as rotas do controller"""

        @self.router.get("/")
        async def listar_demonstracoes(db: Session = Depends(get_db)):
            """Lista os padrões com demonstração executável"""
            demonstracoes = CatalogoBO(db).listar_demonstracoes()
            return {
                "demonstracoes": demonstracoes,
                "total": len(demonstracoes)
            }

        @self.router.get("/{slug}", response_model=DemonstracaoResponse)
        async def executar_demonstracao(slug: str, db: Session = Depends(get_db)):
            """Executa a demonstração e devolve a saída impressa"""
            try:
                return CatalogoBO(db).executar_demonstracao(slug)
            except PadraoNaoEncontrado as e:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail=str(e)
                )
            except Exception as e:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Erro na demonstração: {str(e)}"
                )
