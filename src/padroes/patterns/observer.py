from abc import ABC, abstractmethod
from typing import List


class Observer(ABC):
    @abstractmethod
    def atualizar(self, noticia: str):
        pass


class NewsAgency:
    """Subject - Agência de notícias que avisa seus assinantes"""

    def __init__(self, nome: str = "Agência Central"):
        self.nome = nome
        self._observers: List[Observer] = []
        self.ultima_noticia = None

    def adicionar_observer(self, observer: Observer):
        if observer not in self._observers:
            self._observers.append(observer)

    def remover_observer(self, observer: Observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def notificar_observers(self):
        for observer in list(self._observers):
            observer.atualizar(self.ultima_noticia)

    def publicar(self, noticia: str):
        print(f"[{self.nome}] Publicando: {noticia}")
        self.ultima_noticia = noticia
        self.notificar_observers()

    def total_observers(self) -> int:
        return len(self._observers)


AgenciaDeNoticias = NewsAgency


class AssinanteBase(Observer):
    """Guarda as notícias recebidas para consulta"""

    rotulo = "Assinante"

    def __init__(self, nome: str):
        self.nome = nome
        self.recebidas: List[str] = []

    def atualizar(self, noticia: str):
        self.recebidas.append(noticia)
        print(f"[{self.rotulo} {self.nome}] {self.formatar(noticia)}")

    def formatar(self, noticia: str) -> str:
        return noticia


class CanalDeTV(AssinanteBase):
    rotulo = "TV"

    def formatar(self, noticia: str) -> str:
        return f"Plantão: {noticia}"


class Jornal(AssinanteBase):
    rotulo = "Jornal"

    def formatar(self, noticia: str) -> str:
        return f"Manchete de amanhã: {noticia.upper()}"


class AssinanteEmail(AssinanteBase):
    rotulo = "Email"

    def formatar(self, noticia: str) -> str:
        return f"Enviando para {self.nome}: {noticia}"


def demonstrar():
    agencia = NewsAgency()
    tv = CanalDeTV("Canal 5")
    jornal = Jornal("Diário da Cidade")
    email = AssinanteEmail("leitor@exemplo.com")

    agencia.adicionar_observer(tv)
    agencia.adicionar_observer(jornal)
    agencia.adicionar_observer(email)
    agencia.publicar("Padrões de projeto chegam às escolas")

    agencia.remover_observer(jornal)
    agencia.publicar("Observer reduz acoplamento")
