"""
Padrões GoF do catálogo: cada módulo é um exemplo independente com sua função demonstrar()
"""

from .catalogo import CATALOGO, PadraoNaoEncontrado, executar_demonstracao, renderizar_markdown

__all__ = [
    'CATALOGO',
    'PadraoNaoEncontrado',
    'executar_demonstracao',
    'renderizar_markdown',
]
