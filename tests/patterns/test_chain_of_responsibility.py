"""
Testes do padrão Chain of Responsibility: corrente de suporte e middlewares.
"""

import pytest

from padroes.patterns.chain_of_responsibility import (
    AtendimentoBasico,
    CentralDeSuporte,
    Gerencia,
    Middleware,
    PapelMiddleware,
    Servidor,
    SolicitacaoSuporte,
    SuporteTecnico,
    ThrottlingMiddleware,
    UsuarioExisteMiddleware,
)


@pytest.fixture
def corrente():
    basico = AtendimentoBasico()
    basico.definir_proximo(SuporteTecnico()).definir_proximo(Gerencia())
    return basico


class FakeRelogio:
    def __init__(self):
        self.agora = 0.0

    def __call__(self):
        return self.agora


class TestCorrenteDeSuporte:

    def test_definir_proximo_retorna_o_handler_recebido(self):
        basico = AtendimentoBasico()
        tecnico = SuporteTecnico()
        assert basico.definir_proximo(tecnico) is tecnico

    def test_duvida_tratada_pelo_primeiro_elo(self, corrente):
        resposta = corrente.tratar(SolicitacaoSuporte("duvida", "Horário de atendimento"))
        assert resposta.startswith("[Atendimento]")

    def test_problema_tecnico_repassado(self, corrente):
        resposta = corrente.tratar(SolicitacaoSuporte("tecnico", "Sem internet", 2))
        assert resposta.startswith("[Suporte Técnico]")

    def test_prioridade_alta_vai_para_gerencia(self, corrente):
        resposta = corrente.tratar(SolicitacaoSuporte("duvida", "Urgente", 3))
        assert resposta.startswith("[Gerência]")

    def test_sem_handler_retorna_none(self, corrente, capsys):
        central = CentralDeSuporte(corrente)
        assert central.atender(SolicitacaoSuporte("financeiro", "Boleto", 1)) is None
        assert "Nenhum handler disponível" in capsys.readouterr().out


class TestMiddlewares:

    @pytest.fixture
    def servidor(self):
        servidor = Servidor()
        servidor.registrar("admin@exemplo.com", "admin123")
        servidor.registrar("ana@exemplo.com", "segredo")
        return servidor

    def test_login_sem_middleware(self, servidor):
        assert servidor.login("qualquer", "coisa") is True

    def test_usuario_inexistente(self, servidor, capsys):
        servidor.definir_middleware(UsuarioExisteMiddleware(servidor))
        assert servidor.login("bob@exemplo.com", "x") is False
        assert "Email não registrado" in capsys.readouterr().out

    def test_senha_incorreta(self, servidor, capsys):
        servidor.definir_middleware(UsuarioExisteMiddleware(servidor))
        assert servidor.login("ana@exemplo.com", "errada") is False
        assert "Senha incorreta" in capsys.readouterr().out

    def test_corrente_completa(self, servidor, capsys):
        servidor.definir_middleware(Middleware.ligar(
            ThrottlingMiddleware(5),
            UsuarioExisteMiddleware(servidor),
            PapelMiddleware(),
        ))
        assert servidor.login("admin@exemplo.com", "admin123") is True
        assert servidor.login("ana@exemplo.com", "segredo") is True
        saida = capsys.readouterr().out
        assert "Olá, admin!" in saida
        assert "Olá, usuário!" in saida

    def test_throttling_bloqueia_acima_do_limite(self, servidor):
        relogio = FakeRelogio()
        throttling = ThrottlingMiddleware(2, janela=60.0, relogio=relogio)
        servidor.definir_middleware(throttling)

        assert servidor.login("ana@exemplo.com", "segredo") is True
        assert servidor.login("ana@exemplo.com", "segredo") is True
        assert servidor.login("ana@exemplo.com", "segredo") is False

    def test_throttling_reinicia_contador_apos_janela(self, servidor):
        relogio = FakeRelogio()
        throttling = ThrottlingMiddleware(1, janela=60.0, relogio=relogio)
        servidor.definir_middleware(throttling)

        assert servidor.login("ana@exemplo.com", "segredo") is True
        assert servidor.login("ana@exemplo.com", "segredo") is False

        relogio.agora = 61.0
        assert servidor.login("ana@exemplo.com", "segredo") is True
        assert throttling.requisicoes == 1

    def test_throttling_reinicia_exatamente_no_fim_da_janela(self, servidor):
        relogio = FakeRelogio()
        servidor.definir_middleware(ThrottlingMiddleware(1, janela=60.0, relogio=relogio))

        assert servidor.login("ana@exemplo.com", "segredo") is True
        relogio.agora = 60.0
        assert servidor.login("ana@exemplo.com", "segredo") is True

    def test_throttling_interrompe_corrente(self, servidor, capsys):
        throttling = ThrottlingMiddleware(0, relogio=FakeRelogio())
        servidor.definir_middleware(Middleware.ligar(throttling, UsuarioExisteMiddleware(servidor)))
        assert servidor.login("bob@exemplo.com", "x") is False
        saida = capsys.readouterr().out
        assert "Limite de requisições excedido" in saida
        assert "Email não registrado" not in saida
