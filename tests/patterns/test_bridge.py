"""
Testes do padrão Bridge com controles remotos e dispositivos.
"""

import pytest

from padroes.patterns.bridge import ControleRemoto, ControleRemotoAvancado, Radio, TV


@pytest.mark.parametrize("dispositivo_class", [TV, Radio])
def test_controle_funciona_com_qualquer_dispositivo(dispositivo_class):
    dispositivo = dispositivo_class()
    controle = ControleRemoto(dispositivo)
    volume_inicial = dispositivo.get_volume()

    controle.alternar_energia()
    controle.aumentar_volume()
    controle.proximo_canal()

    assert dispositivo.esta_ligado() is True
    assert dispositivo.get_volume() == volume_inicial + 10
    assert dispositivo.get_canal() == 2


def test_volume_limitado_entre_0_e_100():
    tv = TV()
    controle = ControleRemoto(tv)
    controle.aumentar_volume(500)
    assert tv.get_volume() == 100
    controle.diminuir_volume(500)
    assert tv.get_volume() == 0


def test_canal_nunca_abaixo_de_1():
    radio = Radio()
    ControleRemoto(radio).canal_anterior()
    assert radio.get_canal() == 1


def test_controle_avancado_mudo():
    tv = TV()
    ControleRemotoAvancado(tv).mudo()
    assert tv.get_volume() == 0
    assert tv.status() == "TV desligado, volume 0, canal 1"
