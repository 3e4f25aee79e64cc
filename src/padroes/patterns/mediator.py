"""
Padrão Mediator
Aeronaves não conversam entre si: toda coordenação passa pela torre
"""
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional


class Mediator(ABC):
    @abstractmethod
    def notificar(self, remetente: "Aeronave", evento: str):
        pass


class ControlTower(Mediator):
    """Torre de controle com uma única pista"""

    def __init__(self, nome: str = "Torre"):
        self.nome = nome
        self._aeronaves: List["Aeronave"] = []
        self._fila_pouso: Deque["Aeronave"] = deque()
        self.pista_ocupada_por: Optional["Aeronave"] = None

    def registrar(self, aeronave: "Aeronave"):
        if aeronave not in self._aeronaves:
            self._aeronaves.append(aeronave)
            aeronave.torre = self

    def notificar(self, remetente: "Aeronave", evento: str):
        if evento == "pouso":
            self.solicitar_pouso(remetente)
        elif evento == "liberar":
            self.liberar_pista(remetente)

    def solicitar_pouso(self, aeronave: "Aeronave") -> bool:
        if self.pista_ocupada_por is aeronave:
            return True
        if self.pista_ocupada_por is None:
            self._autorizar(aeronave)
            return True

        if aeronave not in self._fila_pouso:
            self._fila_pouso.append(aeronave)
        aeronave.receber(f"Pista ocupada por {self.pista_ocupada_por.codigo}. Aguarde, posição {len(self._fila_pouso)}")
        return False

    def liberar_pista(self, aeronave: "Aeronave"):
        if self.pista_ocupada_por is not aeronave:
            aeronave.receber("Pista não está alocada para você")
            return

        self.pista_ocupada_por = None
        self._difundir(f"{aeronave.codigo} liberou a pista", exceto=aeronave)
        if self._fila_pouso:
            self._autorizar(self._fila_pouso.popleft())

    def fila(self) -> List[str]:
        return [a.codigo for a in self._fila_pouso]

    def _autorizar(self, aeronave: "Aeronave"):
        self.pista_ocupada_por = aeronave
        aeronave.receber("Pouso autorizado")
        self._difundir(f"{aeronave.codigo} está usando a pista", exceto=aeronave)

    def _difundir(self, mensagem: str, exceto: "Aeronave"):
        for outra in self._aeronaves:
            if outra is not exceto:
                outra.receber(mensagem)


TorreDeControle = ControlTower


class Aeronave:
    """Colleague - Conhece apenas a torre"""

    def __init__(self, codigo: str):
        self.codigo = codigo
        self.torre: Optional[Mediator] = None
        self.mensagens: List[str] = []

    def pousar(self):
        print(f"[{self.codigo}] Solicitando pouso")
        self.torre.notificar(self, "pouso")

    def decolar(self):
        print(f"[{self.codigo}] Pista liberada")
        self.torre.notificar(self, "liberar")

    def receber(self, mensagem: str):
        self.mensagens.append(mensagem)
        print(f"[{self.codigo}] Torre: {mensagem}")


def demonstrar():
    torre = ControlTower()
    voos = [Aeronave("AZ101"), Aeronave("GL202"), Aeronave("LA303")]
    for voo in voos:
        torre.registrar(voo)

    for voo in voos:
        voo.pousar()

    voos[0].decolar()
    voos[1].decolar()
    voos[2].decolar()
