"""
Testes do padrão Iterator sobre a árvore.
"""

import pytest

from padroes.patterns.iterator import IteradorEmLargura, IteradorEmProfundidade, NoArvore


@pytest.fixture
def arvore():
    return NoArvore("A", [
        NoArvore("B", [NoArvore("D"), NoArvore("E")]),
        NoArvore("C", [NoArvore("F")]),
    ])


def test_profundidade_em_pre_ordem(arvore):
    assert list(IteradorEmProfundidade(arvore)) == ["A", "B", "D", "E", "C", "F"]


def test_largura_nivel_a_nivel(arvore):
    assert list(arvore.iterador("largura")) == ["A", "B", "C", "D", "E", "F"]


def test_iteracao_padrao_e_em_profundidade(arvore):
    assert list(arvore) == list(arvore.iterador("profundidade"))


def test_stop_iteration_ao_final():
    iterador = IteradorEmLargura(NoArvore("unico"))
    assert next(iterador) == "unico"
    assert iterador.tem_proximo() is False
    with pytest.raises(StopIteration):
        next(iterador)


def test_iteradores_independentes(arvore):
    primeiro = arvore.iterador()
    segundo = arvore.iterador()
    next(primeiro)
    next(primeiro)
    assert next(segundo) == "A"


def test_modo_invalido(arvore):
    with pytest.raises(ValueError, match="Modo de iteração inválido"):
        arvore.iterador("aleatorio")
