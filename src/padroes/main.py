"""
Aplicação principal do Catálogo de Padrões de Projeto
Implementa padrão MVC expondo os tutoriais e as demonstrações GoF
"""
import uvicorn # type: ignore
from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone
from sqlalchemy.orm import Session

# Configuração do banco
from .database.config import init_db, get_db
from .database.seeds import run_seeds

# Controllers (padrão MVC)
from .controllers.padrao_controller import PadraoController
from .controllers.demo_controller import DemoController

# Business Objects
from .patterns.business_object import CatalogoBO
from .patterns.catalogo import CATALOGO


# Configuração da aplicação principal
app = FastAPI(
    title="Catálogo de Padrões de Projeto",
    description="""
    Tutoriais de padrões de projeto, cada um com Intenção, Problema, Solução,
    Estrutura, Exemplos e Prós/Contras.

    Comportamentais:
    - 🔗 Chain of Responsibility
    - ⚡ Command
    - 🔁 Iterator
    - 👁️ Observer
    - 📐 Template Method
    - 🗼 Mediator
    - 🧭 Visitor

    Estruturais:
    - 🌉 Bridge
    - 🛡️ Proxy
    - 🎨 Decorator
    - 🔌 Adapter
    - 🏛️ Facade
    """,
    version="1.0.0"
)

# Configuração CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Inicializar controllers
padrao_controller = PadraoController()
demo_controller = DemoController()

# Incluir rotas dos controllers
app.include_router(padrao_controller.router)
app.include_router(demo_controller.router)


@app.on_event("startup")
async def startup_event():
    """Inicialização da aplicação"""
    print("🚀 Iniciando Catálogo de Padrões...")
    print("📊 Inicializando banco de dados...")

    init_db()
    run_seeds()

    print("✅ Banco de dados inicializado!")
    print("📚 Documentação disponível em: http://localhost:8000/docs")


@app.get("/")
async def root():
    """Endpoint raiz com informações do sistema"""
    return {
        "message": "📚 Catálogo de Padrões de Projeto",
        "version": "1.0.0",
        "padroes": list(CATALOGO),
        "endpoints": {
            "documentacao": "/docs",
            "padroes": "/padroes/*",
            "demonstracoes": "/demo/*",
        }
    }


@app.get("/health")
async def health_check():
    """Verifica saúde da aplicação"""
    return {
        "status": "healthy",
        "database": "connected",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/stats")
async def obter_estatisticas_sistema(db: Session = Depends(get_db)):
    """Obtém estatísticas gerais do catálogo"""
    try:
        return CatalogoBO(db).obter_estatisticas()
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Erro ao obter estatísticas: {str(e)}"
        )


def run():
    print("📚 Iniciando Catálogo de Padrões...")
    print("📖 Acesse http://localhost:8000/docs para documentação")
    print("🎯 Acesse http://localhost:8000/demo para demonstrações")

    uvicorn.run(
        "padroes.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    run()
