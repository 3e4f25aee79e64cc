"""
Registro das demonstrações e renderização dos tutoriais em Markdown
"""
import io
from contextlib import redirect_stdout
from typing import Callable, Dict, List

from . import (
    adapter, bridge, chain_of_responsibility, command, decorator, facade,
    iterator, mediator, observer, proxy, template_method, visitor,
)


class PadraoNaoEncontrado(LookupError):
    """Slug sem tutorial ou demonstração registrada"""

    def __init__(self, slug: str):
        super().__init__(f"Padrão não encontrado: {slug}")
        self.slug = slug


CATALOGO: Dict[str, Callable[[], None]] = {
    "chain-of-responsibility": chain_of_responsibility.demonstrar,
    "command": command.demonstrar,
    "iterator": iterator.demonstrar,
    "observer": observer.demonstrar,
    "template-method": template_method.demonstrar,
    "mediator": mediator.demonstrar,
    "visitor": visitor.demonstrar,
    "bridge": bridge.demonstrar,
    "proxy": proxy.demonstrar,
    "decorator": decorator.demonstrar,
    "adapter": adapter.demonstrar,
    "facade": facade.demonstrar,
}


def executar_demonstracao(slug: str) -> List[str]:
    """Executa a demonstração e devolve as linhas impressas no console"""
    demonstracao = CATALOGO.get(slug)
    if demonstracao is None:
        raise PadraoNaoEncontrado(slug)

    buffer = io.StringIO()
    with redirect_stdout(buffer):
        demonstracao()
    return buffer.getvalue().splitlines()


def renderizar_markdown(tutorial, saida: List[str] = None) -> str:
    """Monta o documento na ordem Intenção, Problema, Solução, Estrutura, Exemplo, Prós e Contras"""
    if saida is None and tutorial.slug in CATALOGO:
        saida = executar_demonstracao(tutorial.slug)

    partes = [
        f"# {tutorial.nome}",
        f"_Categoria: {tutorial.categoria.value}_",
        "## Intenção",
        tutorial.intencao,
        "## Problema",
        tutorial.problema,
        "## Solução",
        tutorial.solucao,
        "## Estrutura",
        f"```\n{tutorial.estrutura.strip()}\n```",
    ]

    if saida:
        partes.append("## Exemplo")
        partes.append(f"Saída de `{tutorial.slug}`:")
        partes.append("```\n" + "\n".join(saida) + "\n```")

    consideracoes = sorted(tutorial.consideracoes, key=lambda c: c.ordem)
    if consideracoes:
        partes.append("## Prós e Contras")
        partes.append("\n".join(
            f"- {'✅' if c.tipo.value == 'pro' else '❌'} {c.texto}" for c in consideracoes
        ))

    return "\n\n".join(partes) + "\n"
