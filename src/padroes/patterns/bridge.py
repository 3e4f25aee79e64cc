"""
Padrão Bridge
Separa a abstração (controle remoto) da implementação (dispositivo)
"""
from abc import ABC


class Dispositivo(ABC):
    """Interface de implementação comum a todos os aparelhos"""

    nome = "Dispositivo"

    def __init__(self):
        self._ligado = False
        self._volume = 30
        self._canal = 1

    def esta_ligado(self) -> bool:
        return self._ligado

    def ligar(self):
        self._ligado = True

    def desligar(self):
        self._ligado = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int):
        self._volume = max(0, min(100, volume))

    def get_canal(self) -> int:
        return self._canal

    def set_canal(self, canal: int):
        self._canal = max(1, canal)

    def status(self) -> str:
        estado = "ligado" if self._ligado else "desligado"
        return f"{self.nome} {estado}, volume {self._volume}, canal {self._canal}"


class TV(Dispositivo):
    nome = "TV"


class Radio(Dispositivo):
    nome = "Rádio"

    def __init__(self):
        super().__init__()
        self._volume = 15


class ControleRemoto:
    """Abstração - Delega todo o trabalho ao dispositivo"""

    def __init__(self, dispositivo: Dispositivo):
        self._dispositivo = dispositivo

    def alternar_energia(self):
        if self._dispositivo.esta_ligado():
            self._dispositivo.desligar()
        else:
            self._dispositivo.ligar()

    def aumentar_volume(self, passo: int = 10):
        self._dispositivo.set_volume(self._dispositivo.get_volume() + passo)

    def diminuir_volume(self, passo: int = 10):
        self._dispositivo.set_volume(self._dispositivo.get_volume() - passo)

    def proximo_canal(self):
        self._dispositivo.set_canal(self._dispositivo.get_canal() + 1)

    def canal_anterior(self):
        self._dispositivo.set_canal(self._dispositivo.get_canal() - 1)


class ControleRemotoAvancado(ControleRemoto):
    """Abstração refinada"""

    def mudo(self):
        self._dispositivo.set_volume(0)


def demonstrar():
    for dispositivo in (TV(), Radio()):
        controle = ControleRemotoAvancado(dispositivo)
        controle.alternar_energia()
        controle.aumentar_volume()
        controle.proximo_canal()
        print(f"[Controle] {dispositivo.status()}")
        controle.mudo()
        controle.alternar_energia()
        print(f"[Controle] {dispositivo.status()}")
