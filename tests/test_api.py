"""
Testes dos endpoints HTTP do catálogo.
"""


def test_root(client):
    resposta = client.get("/")
    assert resposta.status_code == 200
    assert len(resposta.json()["padroes"]) == 12


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_stats(client):
    dados = client.get("/stats").json()
    assert dados["total_tutoriais"] == 12


def test_listar_padroes(client):
    resposta = client.get("/padroes/")
    assert resposta.status_code == 200
    assert len(resposta.json()) == 12


def test_listar_padroes_por_categoria(client):
    resposta = client.get("/padroes/", params={"categoria": "comportamental"})
    assert {p["categoria"] for p in resposta.json()} == {"comportamental"}


def test_categoria_invalida_retorna_400(client):
    resposta = client.get("/padroes/", params={"categoria": "criacional"})
    assert resposta.status_code == 400
    assert "Categoria inválida" in resposta.json()["detail"]


def test_categorias(client):
    dados = client.get("/padroes/categorias").json()
    assert set(dados) == {"comportamental", "estrutural"}


def test_obter_padrao(client):
    resposta = client.get("/padroes/visitor")
    assert resposta.status_code == 200
    assert resposta.json()["nome"] == "Visitor"


def test_padrao_inexistente_retorna_404(client):
    resposta = client.get("/padroes/singleton")
    assert resposta.status_code == 404
    assert resposta.json()["detail"] == "Padrão não encontrado: singleton"


def test_markdown(client):
    resposta = client.get("/padroes/facade/markdown")
    assert resposta.status_code == 200
    assert resposta.headers["content-type"].startswith("text/markdown")
    assert resposta.text.startswith("# Facade")


def test_listar_demonstracoes(client):
    dados = client.get("/demo/").json()
    assert dados["total"] == 12


def test_executar_demonstracao(client):
    resposta = client.get("/demo/mediator")
    assert resposta.status_code == 200
    dados = resposta.json()
    assert dados["padrao"] == "mediator"
    assert "[AZ101] Torre: Pouso autorizado" in dados["saida"]


def test_demonstracao_inexistente_retorna_404(client):
    assert client.get("/demo/singleton").status_code == 404
