"""
Padrão Visitor
Novas operações sobre as formas sem alterar suas classes (double dispatch)
"""
import math
from abc import ABC, abstractmethod
from typing import List


class Forma(ABC):
    """Element - Cada forma escolhe o método do visitor que lhe corresponde"""

    @abstractmethod
    def aceitar(self, visitor: "Visitor"):
        pass


class Ponto(Forma):
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    def aceitar(self, visitor: "Visitor"):
        return visitor.visitar_ponto(self)


class Circulo(Forma):
    def __init__(self, x: float, y: float, raio: float):
        self.x = x
        self.y = y
        self.raio = raio

    def aceitar(self, visitor: "Visitor"):
        return visitor.visitar_circulo(self)


class Retangulo(Forma):
    def __init__(self, x: float, y: float, largura: float, altura: float):
        self.x = x
        self.y = y
        self.largura = largura
        self.altura = altura

    def aceitar(self, visitor: "Visitor"):
        return visitor.visitar_retangulo(self)


class FormaComposta(Forma):
    def __init__(self, formas: List[Forma] = None):
        self.formas: List[Forma] = list(formas or [])

    def adicionar(self, forma: Forma):
        self.formas.append(forma)

    def aceitar(self, visitor: "Visitor"):
        return visitor.visitar_composta(self)


class Visitor(ABC):
    @abstractmethod
    def visitar_ponto(self, ponto: Ponto):
        pass

    @abstractmethod
    def visitar_circulo(self, circulo: Circulo):
        pass

    @abstractmethod
    def visitar_retangulo(self, retangulo: Retangulo):
        pass

    @abstractmethod
    def visitar_composta(self, composta: FormaComposta):
        pass


class ExportadorXML(Visitor):
    def exportar(self, *formas: Forma) -> str:
        return "\n".join(forma.aceitar(self) for forma in formas)

    def visitar_ponto(self, ponto: Ponto) -> str:
        return f'<ponto x="{ponto.x}" y="{ponto.y}"/>'

    def visitar_circulo(self, circulo: Circulo) -> str:
        return f'<circulo x="{circulo.x}" y="{circulo.y}" raio="{circulo.raio}"/>'

    def visitar_retangulo(self, retangulo: Retangulo) -> str:
        return (f'<retangulo x="{retangulo.x}" y="{retangulo.y}" '
                f'largura="{retangulo.largura}" altura="{retangulo.altura}"/>')

    def visitar_composta(self, composta: FormaComposta) -> str:
        filhos = "".join(forma.aceitar(self) for forma in composta.formas)
        return f"<composta>{filhos}</composta>"


class CalculadoraDeArea(Visitor):
    def visitar_ponto(self, ponto: Ponto) -> float:
        return 0.0

    def visitar_circulo(self, circulo: Circulo) -> float:
        return math.pi * circulo.raio ** 2

    def visitar_retangulo(self, retangulo: Retangulo) -> float:
        return float(retangulo.largura * retangulo.altura)

    def visitar_composta(self, composta: FormaComposta) -> float:
        return sum(forma.aceitar(self) for forma in composta.formas)


def demonstrar():
    formas = [
        Ponto(1, 2),
        Circulo(0, 0, 1),
        Retangulo(0, 0, 3, 4),
        FormaComposta([Ponto(5, 5), Retangulo(1, 1, 2, 2)]),
    ]

    print("[Visitor] Exportando para XML:")
    print(ExportadorXML().exportar(*formas))

    calculadora = CalculadoraDeArea()
    for forma in formas:
        print(f"[Visitor] Área de {type(forma).__name__}: {forma.aceitar(calculadora):.2f}")
