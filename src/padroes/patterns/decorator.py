from abc import ABC, abstractmethod
from typing import Iterable, List


class Notificador(ABC):
    """Interface Component do padrão Decorator"""

    @abstractmethod
    def enviar(self, mensagem: str) -> List[str]:
        pass


class NotificadorEmail(Notificador):
    """Componente concreto: o canal padrão"""

    def __init__(self, destinatario: str = "equipe@exemplo.com"):
        self._destinatario = destinatario

    def enviar(self, mensagem: str) -> List[str]:
        entrega = f"Email para {self._destinatario}: {mensagem}"
        print(f"[Email] {mensagem}")
        return [entrega]


class NotificadorDecorator(Notificador):
    """Decorator base para canais adicionais"""

    def __init__(self, notificador: Notificador):
        self._notificador = notificador

    def enviar(self, mensagem: str) -> List[str]:
        return self._notificador.enviar(mensagem)


# Decorators concretos para cada canal
class NotificadorSMS(NotificadorDecorator):
    def enviar(self, mensagem: str) -> List[str]:
        entregas = self._notificador.enviar(mensagem)
        print(f"[SMS] {mensagem}")
        return entregas + [f"SMS: {mensagem}"]


class NotificadorSlack(NotificadorDecorator):
    def enviar(self, mensagem: str) -> List[str]:
        entregas = self._notificador.enviar(mensagem)
        print(f"[Slack] {mensagem}")
        return entregas + [f"Slack #alertas: {mensagem}"]


class NotificadorFacebook(NotificadorDecorator):
    def enviar(self, mensagem: str) -> List[str]:
        entregas = self._notificador.enviar(mensagem)
        print(f"[Facebook] {mensagem}")
        return entregas + [f"Facebook: {mensagem}"]


def montar_notificador(canais: Iterable[str], base: Notificador = None) -> Notificador:
    """Empilha os decorators na ordem dos canais informados"""
    decorator_map = {
        "sms": NotificadorSMS,
        "slack": NotificadorSlack,
        "facebook": NotificadorFacebook,
    }
    notificador = base or NotificadorEmail()
    for canal in canais:
        decorator_class = decorator_map.get(canal.strip().lower())
        if decorator_class is None:
            raise ValueError(f"Canal inválido: {canal}. Canais válidos: {list(decorator_map)}")
        notificador = decorator_class(notificador)
    return notificador


def demonstrar():
    simples = NotificadorEmail()
    simples.enviar("Deploy concluído")

    completo = montar_notificador(["sms", "slack"])
    completo = NotificadorFacebook(completo)
    entregas = completo.enviar("Servidor fora do ar!")
    print(f"[Cliente] {len(entregas)} canais notificados")
