"""
Padrão Business Object para encapsular a lógica do catálogo
Orquestra o repositório de tutoriais e o registro de demonstrações
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from ..database.crud import TutorialRepository, ConsideracaoRepository
from ..database.models import CategoriaPadraoEnum, TutorialPadrao, TipoConsideracaoEnum
from .catalogo import CATALOGO, PadraoNaoEncontrado, executar_demonstracao, renderizar_markdown


class CatalogoBO:
    """Business Object do catálogo de padrões"""

    def __init__(self, db: Session):
        self.db = db
        self.tutorial_repo = TutorialRepository(db)
        self.consideracao_repo = ConsideracaoRepository(db)

    @staticmethod
    def validar_categoria(categoria: Optional[str]) -> Optional[CategoriaPadraoEnum]:
        """Converte o texto em categoria; ValueError se for inválida"""
        if categoria is None:
            return None
        try:
            return CategoriaPadraoEnum(categoria.lower())
        except ValueError:
            raise ValueError(
                f"Categoria inválida. Categorias válidas: {[c.value for c in CategoriaPadraoEnum]}"
            )

    def listar_tutoriais(self, categoria: Optional[str] = None) -> List[TutorialPadrao]:
        return self.tutorial_repo.listar(self.validar_categoria(categoria))

    def obter_tutorial(self, slug: str) -> TutorialPadrao:
        tutorial = self.tutorial_repo.get_by_slug(slug)
        if not tutorial:
            raise PadraoNaoEncontrado(slug)
        return tutorial

    def tutorial_to_dict(self, tutorial: TutorialPadrao) -> Dict[str, Any]:
        """Monta o dicionário de resposta com prós e contras separados"""
        return {
            "slug": tutorial.slug,
            "nome": tutorial.nome,
            "categoria": tutorial.categoria.value,
            "intencao": tutorial.intencao,
            "problema": tutorial.problema,
            "solucao": tutorial.solucao,
            "estrutura": tutorial.estrutura,
            "pros": [c.texto for c in tutorial.consideracoes if c.tipo == TipoConsideracaoEnum.PRO],
            "contras": [c.texto for c in tutorial.consideracoes if c.tipo == TipoConsideracaoEnum.CONTRA],
            "tem_demonstracao": tutorial.slug in CATALOGO,
        }

    def listar_tutoriais_dict(self, categoria: Optional[str] = None) -> List[Dict[str, Any]]:
        return [self.tutorial_to_dict(t) for t in self.listar_tutoriais(categoria)]

    def obter_tutorial_dict(self, slug: str) -> Dict[str, Any]:
        return self.tutorial_to_dict(self.obter_tutorial(slug))

    def executar_demonstracao(self, slug: str) -> Dict[str, Any]:
        saida = executar_demonstracao(slug)
        return {"padrao": slug, "saida": saida}

    def listar_demonstracoes(self) -> List[str]:
        return list(CATALOGO)

    def gerar_markdown(self, slug: str) -> str:
        return renderizar_markdown(self.obter_tutorial(slug))

    def listar_categorias(self) -> Dict[str, List[str]]:
        return {
            categoria.value: [t.slug for t in self.tutorial_repo.get_by_categoria(categoria)]
            for categoria in CategoriaPadraoEnum
        }

    def obter_estatisticas(self) -> Dict[str, Any]:
        por_tipo = self.consideracao_repo.contar_por_tipo()
        return {
            "total_tutoriais": self.tutorial_repo.count(),
            "por_categoria": self.tutorial_repo.contar_por_categoria(),
            "total_pros": por_tipo.get(TipoConsideracaoEnum.PRO.value, 0),
            "total_contras": por_tipo.get(TipoConsideracaoEnum.CONTRA.value, 0),
            "demonstracoes_disponiveis": len(CATALOGO),
        }
