"""
Testes do padrão Observer com a agência de notícias.
"""

from padroes.patterns.observer import AssinanteEmail, CanalDeTV, Jornal, NewsAgency


def test_todos_os_assinantes_recebem():
    agencia = NewsAgency()
    tv, jornal = CanalDeTV("Canal 1"), Jornal("Folha")
    agencia.adicionar_observer(tv)
    agencia.adicionar_observer(jornal)

    agencia.publicar("Notícia")

    assert tv.recebidas == ["Notícia"]
    assert jornal.recebidas == ["Notícia"]


def test_removido_nao_recebe():
    agencia = NewsAgency()
    email = AssinanteEmail("a@b.com")
    agencia.adicionar_observer(email)
    agencia.remover_observer(email)

    agencia.publicar("Nada para você")

    assert email.recebidas == []
    assert agencia.total_observers() == 0


def test_remover_desconhecido_nao_falha():
    agencia = NewsAgency()
    agencia.remover_observer(CanalDeTV("fantasma"))
    assert agencia.total_observers() == 0


def test_observer_duplicado_registrado_uma_vez():
    agencia = NewsAgency()
    tv = CanalDeTV("Canal 1")
    agencia.adicionar_observer(tv)
    agencia.adicionar_observer(tv)
    agencia.publicar("Uma vez")
    assert tv.recebidas == ["Uma vez"]


def test_formatacao_por_canal(capsys):
    agencia = NewsAgency("Agência")
    agencia.adicionar_observer(Jornal("Diário"))
    agencia.publicar("eleição")
    saida = capsys.readouterr().out
    assert "[Agência] Publicando: eleição" in saida
    assert "[Jornal Diário] Manchete de amanhã: ELEIÇÃO" in saida
