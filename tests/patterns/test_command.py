"""
Testes do padrão Command no editor de texto.
"""

from padroes.patterns.command import Aplicacao, DesfazerCommand


def _app_com_selecao(texto, inicio, fim):
    app = Aplicacao(texto)
    app.editor.selecionar(inicio, fim)
    return app


class TestCommand:

    def test_copiar_nao_entra_no_historico(self):
        app = _app_com_selecao("abcdef", 0, 3)
        app.copiar()
        assert app.clipboard == "abc"
        assert app.historico.obter_historico() == []

    def test_recortar_e_desfazer(self):
        app = _app_com_selecao("abcdef", 1, 4)
        app.recortar()
        assert app.editor.texto == "aef"
        assert app.clipboard == "bcd"

        assert app.desfazer() is True
        assert app.editor.texto == "abcdef"

    def test_colar_substitui_selecao(self):
        app = _app_com_selecao("abcdef", 0, 2)
        app.copiar()
        app.editor.selecionar(4, 6)
        app.colar()
        assert app.editor.texto == "abcdab"
        assert app.historico.obter_historico() == ["ColarCommand"]

    def test_refazer_apos_desfazer(self):
        app = _app_com_selecao("abc", 0, 1)
        app.copiar()
        app.editor.selecionar(3, 3)
        app.colar()
        assert app.editor.texto == "abca"

        app.desfazer()
        assert app.editor.texto == "abc"
        assert app.refazer() is True
        assert app.editor.texto == "abca"

    def test_novo_comando_descarta_refazer(self):
        app = _app_com_selecao("abc", 0, 1)
        app.recortar()
        app.desfazer()
        app.editor.selecionar(2, 3)
        app.recortar()
        assert app.refazer() is False
        assert app.historico.obter_historico() == ["RecortarCommand"]

    def test_desfazer_sem_historico(self, capsys):
        app = Aplicacao("abc")
        assert app.desfazer() is False
        assert "Nenhum comando para desfazer!" in capsys.readouterr().out

    def test_desfazer_command(self):
        app = _app_com_selecao("abc", 0, 3)
        app.recortar()
        app.executar_comando(DesfazerCommand(app, app.editor))
        assert app.editor.texto == "abc"
        assert app.historico.obter_historico() == []

    def test_refazer_colar_ignora_nova_selecao_e_clipboard(self):
        app = _app_com_selecao("abcdef", 0, 1)
        app.copiar()
        app.editor.selecionar(6, 6)
        app.colar()
        app.desfazer()

        app.editor.selecionar(1, 3)
        app.copiar()
        assert app.refazer() is True
        assert app.editor.texto == "abcdefa"
        assert app.clipboard == "a"

    def test_refazer_recortar_repete_o_mesmo_corte(self):
        app = _app_com_selecao("abcdef", 0, 2)
        app.recortar()
        app.desfazer()

        app.editor.selecionar(3, 6)
        assert app.refazer() is True
        assert app.editor.texto == "cdef"
        assert app.clipboard == "ab"
