#!/usr/bin/env python3
"""
Script para inicializar o banco de dados SQLite
Cria o banco e executa as seeds se necessário
"""
import sys
from pathlib import Path

# Adicionar src ao path quando executado sem instalação
sys.path.insert(0, str(Path(__file__).parent / "src"))

from sqlalchemy import inspect

from padroes.database.config import init_db, engine, SessionLocal, DATABASE_URL
from padroes.database.crud import TutorialRepository, ConsideracaoRepository
from padroes.database.seeds import run_seeds


def check_tables_exist():
    """Verifica se as tabelas existem no banco"""
    return inspect(engine).has_table("tutoriais")


def get_database_info():
    """Obtém informações sobre o banco de dados"""
    tables = sorted(inspect(engine).get_table_names())
    db = SessionLocal()
    try:
        counts = {
            "tutoriais": TutorialRepository(db).count(),
            "consideracoes": ConsideracaoRepository(db).count(),
        }
    finally:
        db.close()
    return tables, counts


def main():
    """Função principal"""
    print("📚 Inicializador do Banco de Dados - Catálogo de Padrões")
    print("=" * 60)
    print(f"📁 Banco: {DATABASE_URL}")

    tables_exist = check_tables_exist()
    print(f"📋 Tabelas criadas: {'✅ Sim' if tables_exist else '❌ Não'}")

    try:
        if not tables_exist:
            print("📊 Criando tabelas...")
            init_db()
            print("✅ Tabelas criadas com sucesso!")

        run_seeds()
    except Exception as e:
        print(f"❌ Erro durante a inicialização: {e}")
        return 1

    print("\n📊 Informações do banco de dados:")
    tables, counts = get_database_info()
    print(f"📋 Tabelas criadas ({len(tables)}): {', '.join(tables)}")
    print("\n📈 Registros por tabela:")
    for table, count in counts.items():
        print(f"   {table}: {count} registros")

    print("\n🎉 Catálogo pronto para uso!")
    print("🚀 Execute: python main.py para iniciar o servidor")
    return 0


if __name__ == "__main__":
    sys.exit(main())
