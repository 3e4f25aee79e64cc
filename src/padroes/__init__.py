"""
Catálogo de Padrões de Projeto
"""

__version__ = "1.0.0"
