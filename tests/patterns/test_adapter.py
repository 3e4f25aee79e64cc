"""
Testes do padrão Adapter com pinos e buracos.
"""

import math

import pytest

from padroes.patterns.adapter import AdaptadorPinoQuadrado, BuracoRedondo, PinoQuadrado, PinoRedondo


def test_pino_redondo_compativel():
    buraco = BuracoRedondo(5)
    assert buraco.encaixa(PinoRedondo(5)) is True
    assert buraco.encaixa(PinoRedondo(6)) is False


def test_adaptador_calcula_raio():
    adaptador = AdaptadorPinoQuadrado(PinoQuadrado(10))
    assert adaptador.get_raio() == pytest.approx(10 * math.sqrt(2) / 2)


@pytest.mark.parametrize("largura,encaixa", [(5, True), (7, True), (8, False), (10, False)])
def test_pino_quadrado_via_adaptador(largura, encaixa):
    buraco = BuracoRedondo(5)
    assert buraco.encaixa(AdaptadorPinoQuadrado(PinoQuadrado(largura))) is encaixa
