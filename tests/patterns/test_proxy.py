"""
Testes do padrão Proxy: cache e proteção do serviço de vídeo.
"""

import pytest

from padroes.patterns.proxy import (
    GerenciadorDeVideos, ProxyComCache, ProxyDeProtecao, ServicoDeVideoRemoto,
)


def test_cache_evita_chamadas_repetidas():
    remoto = ServicoDeVideoRemoto()
    proxy = ProxyComCache(remoto)

    proxy.listar_videos()
    proxy.listar_videos()
    proxy.obter_info("v1")
    proxy.obter_info("v1")
    proxy.baixar_video("v2")
    proxy.baixar_video("v2")

    assert remoto.chamadas == 3


def test_resetar_cache():
    remoto = ServicoDeVideoRemoto()
    proxy = ProxyComCache(remoto)
    proxy.listar_videos()
    proxy.resetar()
    proxy.listar_videos()
    assert remoto.chamadas == 2


def test_cache_devolve_copias():
    proxy = ProxyComCache(ServicoDeVideoRemoto())
    lista = proxy.listar_videos()
    lista.clear()
    assert proxy.listar_videos() == ["v1", "v2", "v3"]


def test_video_inexistente_propaga_erro():
    proxy = ProxyComCache(ServicoDeVideoRemoto())
    with pytest.raises(KeyError):
        proxy.obter_info("nao-existe")


def test_protecao_nega_usuario_nao_autorizado():
    remoto = ServicoDeVideoRemoto()
    proxy = ProxyDeProtecao(remoto, "visitante", autorizados=["admin"])
    with pytest.raises(PermissionError, match="Acesso negado"):
        proxy.baixar_video("v1")
    assert remoto.chamadas == 0


def test_protecao_permite_autorizado():
    proxy = ProxyDeProtecao(ServicoDeVideoRemoto(), "admin", autorizados=["admin"])
    assert proxy.baixar_video("v1") == "conteudo-v1"


def test_gerenciador_nao_distingue_proxy_do_real():
    for servico in (ServicoDeVideoRemoto(), ProxyComCache(ServicoDeVideoRemoto())):
        gerenciador = GerenciadorDeVideos(servico)
        assert gerenciador.renderizar_pagina("v2") == "Página do vídeo 'Proxy na Prática'"
