"""
Controllers do padrão MVC para o catálogo de padrões
"""

from .padrao_controller import PadraoController
from .demo_controller import DemoController

__all__ = [
    'PadraoController',
    'DemoController'
]
