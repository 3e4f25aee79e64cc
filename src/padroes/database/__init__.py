"""
Módulo de banco de dados
"""
from .config import get_db, init_db
from .models import *
from .crud import *
from .seeds import run_seeds

__all__ = [
    'get_db',
    'init_db',
    'run_seeds',
    'TutorialRepository',
    'ConsideracaoRepository',
    'TutorialPadrao',
    'ConsideracaoPadrao',
    'CategoriaPadraoEnum',
    'TipoConsideracaoEnum'
]
