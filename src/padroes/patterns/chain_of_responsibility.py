"""
Padrão Chain of Responsibility
Passa uma solicitação por uma corrente de handlers até que um deles a trate
"""
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional


@dataclass
class SolicitacaoSuporte:
    tipo: str
    descricao: str
    prioridade: int = 1


class SupportHandler(ABC):
    """Interface Handler da corrente de suporte"""

    def __init__(self):
        self._proximo: Optional["SupportHandler"] = None

    def definir_proximo(self, handler: "SupportHandler") -> "SupportHandler":
        """Define o próximo elo e o retorna, permitindo a.definir_proximo(b).definir_proximo(c)"""
        self._proximo = handler
        return handler

    @abstractmethod
    def tratar(self, solicitacao: SolicitacaoSuporte) -> Optional[str]:
        if self._proximo:
            return self._proximo.tratar(solicitacao)
        return None


class AtendimentoBasico(SupportHandler):
    """Responde dúvidas simples"""

    def tratar(self, solicitacao: SolicitacaoSuporte) -> Optional[str]:
        if solicitacao.tipo == "duvida" and solicitacao.prioridade < 3:
            return f"[Atendimento] Dúvida respondida: {solicitacao.descricao}"
        return super().tratar(solicitacao)


class SuporteTecnico(SupportHandler):
    """Resolve problemas técnicos"""

    def tratar(self, solicitacao: SolicitacaoSuporte) -> Optional[str]:
        if solicitacao.tipo == "tecnico" and solicitacao.prioridade < 3:
            return f"[Suporte Técnico] Problema resolvido: {solicitacao.descricao}"
        return super().tratar(solicitacao)


class Gerencia(SupportHandler):
    """Assume qualquer solicitação de prioridade alta"""

    def tratar(self, solicitacao: SolicitacaoSuporte) -> Optional[str]:
        if solicitacao.prioridade >= 3:
            return f"[Gerência] Caso escalado e tratado: {solicitacao.descricao}"
        return super().tratar(solicitacao)


class CentralDeSuporte:
    """Cliente que conhece apenas o primeiro elo da corrente"""

    def __init__(self, primeiro: SupportHandler):
        self._primeiro = primeiro

    def atender(self, solicitacao: SolicitacaoSuporte) -> Optional[str]:
        resposta = self._primeiro.tratar(solicitacao)
        if resposta is None:
            print(f"[Central] Nenhum handler disponível para '{solicitacao.descricao}'")
        else:
            print(resposta)
        return resposta


# Middlewares de autenticação

class Middleware(ABC):
    """Elo base de uma corrente de verificações"""

    def __init__(self):
        self._proximo: Optional["Middleware"] = None

    @staticmethod
    def ligar(primeiro: "Middleware", *elos: "Middleware") -> "Middleware":
        """Encadeia os middlewares na ordem recebida e retorna o primeiro"""
        atual = primeiro
        for elo in elos:
            atual._proximo = elo
            atual = elo
        return primeiro

    @abstractmethod
    def verificar(self, email: str, senha: str) -> bool:
        pass

    def verificar_proximo(self, email: str, senha: str) -> bool:
        if self._proximo is None:
            return True
        return self._proximo.verificar(email, senha)


class ThrottlingMiddleware(Middleware):
    """Limita o número de requisições dentro de uma janela de tempo"""

    def __init__(self, limite_por_minuto: int, janela: float = 60.0,
                 relogio: Callable[[], float] = time.monotonic):
        super().__init__()
        self.limite = limite_por_minuto
        self.janela = janela
        self._relogio = relogio
        self.requisicoes = 0
        self._inicio = relogio()

    def verificar(self, email: str, senha: str) -> bool:
        agora = self._relogio()
        if agora - self._inicio >= self.janela:
            self.requisicoes = 0
            self._inicio = agora

        self.requisicoes += 1
        if self.requisicoes > self.limite:
            print("[Throttling] Limite de requisições excedido!")
            return False
        return self.verificar_proximo(email, senha)


class UsuarioExisteMiddleware(Middleware):
    def __init__(self, servidor: "Servidor"):
        super().__init__()
        self._servidor = servidor

    def verificar(self, email: str, senha: str) -> bool:
        if not self._servidor.tem_email(email):
            print("[Autenticação] Email não registrado!")
            return False
        if not self._servidor.senha_valida(email, senha):
            print("[Autenticação] Senha incorreta!")
            return False
        return self.verificar_proximo(email, senha)


class PapelMiddleware(Middleware):
    def __init__(self, email_admin: str = "admin@exemplo.com"):
        super().__init__()
        self._email_admin = email_admin

    def verificar(self, email: str, senha: str) -> bool:
        if email == self._email_admin:
            print("[Papel] Olá, admin!")
            return True
        print("[Papel] Olá, usuário!")
        return self.verificar_proximo(email, senha)


class Servidor:
    def __init__(self):
        self._usuarios: Dict[str, str] = {}
        self._middleware: Optional[Middleware] = None

    def definir_middleware(self, middleware: Middleware):
        self._middleware = middleware

    def registrar(self, email: str, senha: str):
        self._usuarios[email] = senha

    def tem_email(self, email: str) -> bool:
        return email in self._usuarios

    def senha_valida(self, email: str, senha: str) -> bool:
        return self._usuarios.get(email) == senha

    def login(self, email: str, senha: str) -> bool:
        if self._middleware is None or self._middleware.verificar(email, senha):
            print("[Servidor] Autorização concluída!")
            return True
        return False


def demonstrar():
    basico = AtendimentoBasico()
    basico.definir_proximo(SuporteTecnico()).definir_proximo(Gerencia())
    central = CentralDeSuporte(basico)

    central.atender(SolicitacaoSuporte("duvida", "Como redefinir minha senha?"))
    central.atender(SolicitacaoSuporte("tecnico", "Impressora não conecta", 2))
    central.atender(SolicitacaoSuporte("financeiro", "Cobrança em duplicidade", 4))
    central.atender(SolicitacaoSuporte("financeiro", "Segunda via de boleto", 1))

    servidor = Servidor()
    servidor.registrar("admin@exemplo.com", "admin123")
    servidor.registrar("usuario@exemplo.com", "senha123")
    servidor.definir_middleware(Middleware.ligar(
        ThrottlingMiddleware(2),
        UsuarioExisteMiddleware(servidor),
        PapelMiddleware(),
    ))

    servidor.login("usuario@exemplo.com", "errada")
    servidor.login("admin@exemplo.com", "admin123")
    servidor.login("usuario@exemplo.com", "senha123")
