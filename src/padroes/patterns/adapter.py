"""
Padrão Adapter
Faz um pino quadrado caber na interface de buraco redondo
"""
import math


class PinoRedondo:
    def __init__(self, raio: float):
        self._raio = raio

    def get_raio(self) -> float:
        return self._raio


class BuracoRedondo:
    def __init__(self, raio: float):
        self._raio = raio

    def get_raio(self) -> float:
        return self._raio

    def encaixa(self, pino: PinoRedondo) -> bool:
        return self._raio >= pino.get_raio()


class PinoQuadrado:
    """Classe com interface incompatível: não tem raio"""

    def __init__(self, largura: float):
        self._largura = largura

    def get_largura(self) -> float:
        return self._largura


class AdaptadorPinoQuadrado(PinoRedondo):
    """Apresenta o pino quadrado como o menor círculo que o contém"""

    def __init__(self, pino: PinoQuadrado):
        super().__init__(0)
        self._pino = pino

    def get_raio(self) -> float:
        return self._pino.get_largura() * math.sqrt(2) / 2


def demonstrar():
    buraco = BuracoRedondo(5)
    print(f"[Adapter] Pino redondo de raio 5 encaixa? {buraco.encaixa(PinoRedondo(5))}")

    for largura in (5, 10):
        adaptador = AdaptadorPinoQuadrado(PinoQuadrado(largura))
        print(f"[Adapter] Pino quadrado de largura {largura} "
              f"(raio {adaptador.get_raio():.2f}) encaixa? {buraco.encaixa(adaptador)}")
