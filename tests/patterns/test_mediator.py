"""
Testes do padrão Mediator com a torre de controle.
"""

import pytest

from padroes.patterns.mediator import Aeronave, ControlTower


@pytest.fixture
def torre_com_voos():
    torre = ControlTower()
    voos = [Aeronave("A1"), Aeronave("B2"), Aeronave("C3")]
    for voo in voos:
        torre.registrar(voo)
    return torre, voos


def test_primeiro_pouso_autorizado(torre_com_voos):
    torre, (a1, b2, _) = torre_com_voos
    a1.pousar()
    assert torre.pista_ocupada_por is a1
    assert a1.mensagens[-1] == "Pouso autorizado"
    assert "A1 está usando a pista" in b2.mensagens


def test_pista_ocupada_enfileira(torre_com_voos):
    torre, (a1, b2, c3) = torre_com_voos
    a1.pousar()
    b2.pousar()
    c3.pousar()
    assert torre.fila() == ["B2", "C3"]
    assert torre.solicitar_pouso(b2) is False
    assert torre.fila() == ["B2", "C3"]


def test_liberar_pista_autoriza_proximo_da_fila(torre_com_voos):
    torre, (a1, b2, c3) = torre_com_voos
    a1.pousar()
    b2.pousar()
    c3.pousar()

    a1.decolar()

    assert torre.pista_ocupada_por is b2
    assert b2.mensagens[-1] == "Pouso autorizado"
    assert torre.fila() == ["C3"]


def test_liberar_sem_ser_dono_da_pista(torre_com_voos):
    torre, (a1, b2, _) = torre_com_voos
    a1.pousar()
    b2.decolar()
    assert torre.pista_ocupada_por is a1
    assert b2.mensagens[-1] == "Pista não está alocada para você"


def test_pista_livre_apos_ultima_decolagem(torre_com_voos):
    torre, (a1, _, _) = torre_com_voos
    a1.pousar()
    a1.decolar()
    assert torre.pista_ocupada_por is None


def test_dono_da_pista_nao_entra_na_propria_fila(torre_com_voos):
    torre, (a1, b2, _) = torre_com_voos
    a1.pousar()
    assert torre.solicitar_pouso(a1) is True
    a1.pousar()
    assert torre.fila() == []
    assert not any("Pista ocupada por A1" in m for m in a1.mensagens)

    b2.pousar()
    a1.decolar()
    assert torre.pista_ocupada_por is b2
    assert torre.fila() == []
