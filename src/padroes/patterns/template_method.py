"""
Padrão Template Method
O esqueleto do algoritmo fica na classe base e as subclasses preenchem os passos
"""
from abc import ABC, abstractmethod
from typing import Dict, List


class MineradorDeDados(ABC):
    """Classe abstrata com o método template minerar()"""

    formato = "?"

    def __init__(self):
        self.passos: List[str] = []

    def minerar(self, caminho: str) -> Dict[str, int]:
        """Método template: a ordem dos passos não muda entre subclasses"""
        self.passos = []
        self.abrir_arquivo(caminho)
        bruto = self.extrair_dados()
        dados = self.parse_dados(bruto)
        analise = self.analisar(dados)
        if self.deve_enviar_relatorio(dados):
            self.enviar_relatorio(analise)
        self.fechar_arquivo()
        return analise

    @abstractmethod
    def abrir_arquivo(self, caminho: str):
        pass

    @abstractmethod
    def extrair_dados(self) -> str:
        pass

    @abstractmethod
    def parse_dados(self, bruto: str) -> List[str]:
        pass

    @abstractmethod
    def fechar_arquivo(self):
        pass

    def analisar(self, dados: List[str]) -> Dict[str, int]:
        self._registrar("analisar")
        return {"registros": len(dados), "caracteres": sum(len(d) for d in dados)}

    def deve_enviar_relatorio(self, dados: List[str]) -> bool:
        """Hook: subclasses podem pular o relatório"""
        return True

    def enviar_relatorio(self, analise: Dict[str, int]):
        self._registrar("enviar_relatorio")
        print(f"[{self.formato}] Relatório: {analise['registros']} registros, {analise['caracteres']} caracteres")

    def _registrar(self, passo: str):
        self.passos.append(passo)


class MineradorCSV(MineradorDeDados):
    formato = "CSV"

    def __init__(self, conteudo: str = "nome,idade\nAna,30\nBruno,25"):
        super().__init__()
        self._conteudo = conteudo

    def abrir_arquivo(self, caminho: str):
        self._registrar("abrir_arquivo")
        print(f"[CSV] Abrindo {caminho}")

    def extrair_dados(self) -> str:
        self._registrar("extrair_dados")
        return self._conteudo

    def parse_dados(self, bruto: str) -> List[str]:
        self._registrar("parse_dados")
        linhas = [linha for linha in bruto.splitlines() if linha.strip()]
        return linhas[1:]  # cabeçalho

    def fechar_arquivo(self):
        self._registrar("fechar_arquivo")
        print("[CSV] Arquivo fechado")


class MineradorDOC(MineradorDeDados):
    formato = "DOC"

    def __init__(self, conteudo: str = "Primeiro parágrafo.\n\nSegundo parágrafo."):
        super().__init__()
        self._conteudo = conteudo

    def abrir_arquivo(self, caminho: str):
        self._registrar("abrir_arquivo")
        print(f"[DOC] Abrindo documento {caminho}")

    def extrair_dados(self) -> str:
        self._registrar("extrair_dados")
        return self._conteudo

    def parse_dados(self, bruto: str) -> List[str]:
        self._registrar("parse_dados")
        return [p.strip() for p in bruto.split("\n\n") if p.strip()]

    def fechar_arquivo(self):
        self._registrar("fechar_arquivo")
        print("[DOC] Documento fechado")


class MineradorPDF(MineradorDeDados):
    formato = "PDF"

    def __init__(self, paginas: List[str] = None):
        super().__init__()
        self._paginas = paginas if paginas is not None else ["Capa", "Sumário", "Conteúdo"]

    def abrir_arquivo(self, caminho: str):
        self._registrar("abrir_arquivo")
        print(f"[PDF] Abrindo {caminho}")

    def extrair_dados(self) -> str:
        self._registrar("extrair_dados")
        return "\f".join(self._paginas)

    def parse_dados(self, bruto: str) -> List[str]:
        self._registrar("parse_dados")
        return [pagina for pagina in bruto.split("\f") if pagina]

    def deve_enviar_relatorio(self, dados: List[str]) -> bool:
        if not dados:
            print("[PDF] Nada extraído, relatório não será enviado")
            return False
        return True

    def fechar_arquivo(self):
        self._registrar("fechar_arquivo")
        print("[PDF] Arquivo fechado")


def demonstrar():
    for minerador, caminho in [
        (MineradorCSV(), "clientes.csv"),
        (MineradorDOC(), "ata.doc"),
        (MineradorPDF(), "manual.pdf"),
        (MineradorPDF(paginas=[]), "vazio.pdf"),
    ]:
        minerador.minerar(caminho)
