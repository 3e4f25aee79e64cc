"""
Padrão Iterator
Percorre uma árvore sem expor sua estrutura interna
"""
from abc import ABC, abstractmethod
from collections import deque
from typing import Any, List, Optional


class NoArvore:
    """Coleção composta: cada nó guarda um valor e seus filhos"""

    def __init__(self, valor: Any, filhos: Optional[List["NoArvore"]] = None):
        self.valor = valor
        self.filhos: List[NoArvore] = list(filhos or [])

    def adicionar(self, filho: "NoArvore") -> "NoArvore":
        self.filhos.append(filho)
        return filho

    def iterador(self, modo: str = "profundidade") -> "TreeIterator":
        iteradores = {
            "profundidade": IteradorEmProfundidade,
            "largura": IteradorEmLargura,
        }
        iterador_class = iteradores.get(modo)
        if iterador_class is None:
            raise ValueError(f"Modo de iteração inválido: {modo}. Modos válidos: {list(iteradores)}")
        return iterador_class(self)

    def __iter__(self):
        return self.iterador()


class TreeIterator(ABC):
    """Interface Iterator, compatível com o protocolo de iteração do Python"""

    def __init__(self, raiz: NoArvore):
        self._raiz = raiz

    @abstractmethod
    def tem_proximo(self) -> bool:
        pass

    @abstractmethod
    def _proximo_no(self) -> NoArvore:
        pass

    def __iter__(self):
        return self

    def __next__(self) -> Any:
        if not self.tem_proximo():
            raise StopIteration
        return self._proximo_no().valor


class IteradorEmProfundidade(TreeIterator):
    """Pré-ordem: visita o nó e depois cada filho da esquerda para a direita"""

    def __init__(self, raiz: NoArvore):
        super().__init__(raiz)
        self._pilha = [raiz]

    def tem_proximo(self) -> bool:
        return bool(self._pilha)

    def _proximo_no(self) -> NoArvore:
        no = self._pilha.pop()
        self._pilha.extend(reversed(no.filhos))
        return no


class IteradorEmLargura(TreeIterator):
    """Nível a nível, a partir da raiz"""

    def __init__(self, raiz: NoArvore):
        super().__init__(raiz)
        self._fila = deque([raiz])

    def tem_proximo(self) -> bool:
        return bool(self._fila)

    def _proximo_no(self) -> NoArvore:
        no = self._fila.popleft()
        self._fila.extend(no.filhos)
        return no


def demonstrar():
    raiz = NoArvore("Diretoria", [
        NoArvore("Engenharia", [NoArvore("Backend"), NoArvore("Frontend")]),
        NoArvore("Comercial", [NoArvore("Vendas")]),
    ])

    print("[Iterator] Em profundidade: " + " -> ".join(raiz.iterador("profundidade")))
    print("[Iterator] Em largura: " + " -> ".join(raiz.iterador("largura")))

    iterador = raiz.iterador("largura")
    while iterador.tem_proximo():
        print(f"[Cliente] Visitando {next(iterador)}")
