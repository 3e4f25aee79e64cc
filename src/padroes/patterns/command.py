"""
Padrão Command para encapsular ações de um editor de texto
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class Editor:
    """Receiver - Guarda o texto e a seleção atual"""

    def __init__(self, texto: str = ""):
        self.texto = texto
        self.inicio_selecao = 0
        self.fim_selecao = 0

    def selecionar(self, inicio: int, fim: int):
        self.inicio_selecao = max(0, inicio)
        self.fim_selecao = min(len(self.texto), fim)

    def get_selecao(self) -> str:
        return self.texto[self.inicio_selecao:self.fim_selecao]

    def apagar_selecao(self):
        self.texto = self.texto[:self.inicio_selecao] + self.texto[self.fim_selecao:]
        self.fim_selecao = self.inicio_selecao

    def substituir_selecao(self, conteudo: str):
        self.texto = self.texto[:self.inicio_selecao] + conteudo + self.texto[self.fim_selecao:]
        self.inicio_selecao += len(conteudo)
        self.fim_selecao = self.inicio_selecao


class Command(ABC):
    """Interface Command"""

    def __init__(self, app: "Aplicacao", editor: Editor):
        self._app = app
        self._editor = editor
        self._backup: Optional[Tuple[str, int, int]] = None
        self._resultado: Optional[Tuple[str, int, int, str]] = None

    def salvar_backup(self):
        editor = self._editor
        self._backup = (editor.texto, editor.inicio_selecao, editor.fim_selecao)

    def desfazer(self):
        """Restaura o texto e a seleção anteriores à execução"""
        if self._backup is not None:
            texto, inicio, fim = self._backup
            self._editor.texto = texto
            self._editor.inicio_selecao = inicio
            self._editor.fim_selecao = fim

    def salvar_resultado(self):
        editor = self._editor
        self._resultado = (editor.texto, editor.inicio_selecao, editor.fim_selecao, self._app.clipboard)

    def refazer(self):
        """Reaplica o estado produzido na primeira execução"""
        if self._resultado is not None:
            texto, inicio, fim, clipboard = self._resultado
            self._editor.texto = texto
            self._editor.inicio_selecao = inicio
            self._editor.fim_selecao = fim
            self._app.clipboard = clipboard

    @abstractmethod
    def executar(self) -> bool:
        """Retorna True quando o comando altera o editor e deve ir para o histórico"""
        pass


class CopiarCommand(Command):
    def executar(self) -> bool:
        self._app.clipboard = self._editor.get_selecao()
        print(f"[Command] Copiado: '{self._app.clipboard}'")
        return False


class RecortarCommand(Command):
    def executar(self) -> bool:
        self.salvar_backup()
        self._app.clipboard = self._editor.get_selecao()
        self._editor.apagar_selecao()
        self.salvar_resultado()
        print(f"[Command] Recortado: '{self._app.clipboard}'")
        return True


class ColarCommand(Command):
    def executar(self) -> bool:
        self.salvar_backup()
        self._editor.substituir_selecao(self._app.clipboard)
        self.salvar_resultado()
        print(f"[Command] Colado: '{self._app.clipboard}'")
        return True


class DesfazerCommand(Command):
    def executar(self) -> bool:
        self._app.desfazer()
        return False


class HistoricoDeComandos:
    """Invoker - Gerencia o histórico para desfazer e refazer"""

    def __init__(self):
        self._historico: List[Command] = []
        self._posicao_atual = -1

    def empilhar(self, comando: Command):
        # Um novo comando descarta o que poderia ser refeito
        self._historico = self._historico[:self._posicao_atual + 1]
        self._historico.append(comando)
        self._posicao_atual += 1

    def desfazer(self) -> bool:
        if self._posicao_atual >= 0:
            self._historico[self._posicao_atual].desfazer()
            self._posicao_atual -= 1
            print(f"[Invoker] Comando desfeito. Posição atual: {self._posicao_atual}")
            return True

        print("[Invoker] Nenhum comando para desfazer!")
        return False

    def refazer(self) -> bool:
        if self._posicao_atual < len(self._historico) - 1:
            self._posicao_atual += 1
            self._historico[self._posicao_atual].refazer()
            print(f"[Invoker] Comando refeito. Posição atual: {self._posicao_atual}")
            return True

        print("[Invoker] Nenhum comando para refazer!")
        return False

    def obter_historico(self) -> List[str]:
        return [type(cmd).__name__ for cmd in self._historico[:self._posicao_atual + 1]]


class Aplicacao:
    """Cliente - Cria os comandos e os entrega ao invoker"""

    def __init__(self, texto: str = ""):
        self.editor = Editor(texto)
        self.clipboard = ""
        self.historico = HistoricoDeComandos()

    def executar_comando(self, comando: Command):
        if comando.executar():
            self.historico.empilhar(comando)

    def copiar(self):
        self.executar_comando(CopiarCommand(self, self.editor))

    def recortar(self):
        self.executar_comando(RecortarCommand(self, self.editor))

    def colar(self):
        self.executar_comando(ColarCommand(self, self.editor))

    def desfazer(self) -> bool:
        return self.historico.desfazer()

    def refazer(self) -> bool:
        return self.historico.refazer()


def demonstrar():
    app = Aplicacao("Olá mundo dos padrões")
    app.editor.selecionar(0, 4)
    app.copiar()
    app.editor.selecionar(len(app.editor.texto), len(app.editor.texto))
    app.colar()
    print(f"[Editor] Texto: '{app.editor.texto}'")

    app.editor.selecionar(4, 10)
    app.recortar()
    print(f"[Editor] Texto: '{app.editor.texto}'")

    app.executar_comando(DesfazerCommand(app, app.editor))
    print(f"[Editor] Texto: '{app.editor.texto}'")
    app.desfazer()
    print(f"[Editor] Texto: '{app.editor.texto}'")
    app.desfazer()
