"""
Ponto de entrada do Catálogo de Padrões de Projeto
Execute: python main.py
"""
import sys
from pathlib import Path

# Adicionar src ao path quando executado sem instalação
sys.path.insert(0, str(Path(__file__).parent / "src"))

from padroes.main import run


if __name__ == "__main__":
    run()
