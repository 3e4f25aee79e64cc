"""
Sistema de Seeds para popular o banco de dados com os tutoriais
"""
from sqlalchemy.orm import Session

from .config import SessionLocal, init_db
from .crud import TutorialRepository
from .models import CategoriaPadraoEnum

COMPORTAMENTAL = CategoriaPadraoEnum.COMPORTAMENTAL
ESTRUTURAL = CategoriaPadraoEnum.ESTRUTURAL

TUTORIAIS = [
    {
        "slug": "chain-of-responsibility",
        "nome": "Chain of Responsibility",
        "categoria": COMPORTAMENTAL,
        "intencao": "Permite passar solicitações por uma corrente de handlers. Cada handler decide se "
                    "processa a solicitação ou se a repassa ao próximo da corrente.",
        "problema": "Um sistema de suporte precisa encaminhar chamados para atendimento, suporte técnico "
                    "ou gerência. Colocar todas as regras em um único bloco de condicionais deixa o código "
                    "rígido, e cada nova verificação (limite de requisições, autenticação, papel do usuário) "
                    "aumenta o acoplamento.",
        "solucao": "Transformar cada verificação em um objeto handler com uma referência para o próximo. "
                   "O cliente entrega a solicitação ao primeiro elo; se ninguém tratar, a corrente termina "
                   "e o cliente informa que nenhum handler está disponível.",
        "estrutura": """
+----------+      +-------------------+
| Cliente  |----->|   <<Handler>>     |<----+
+----------+      | + definir_proximo |     | proximo
                  | + tratar()        |-----+
                  +-------------------+
                     ^       ^      ^
          +----------+       |      +----------+
  AtendimentoBasico   SuporteTecnico     Gerencia
""",
        "pros": [
            "Controla a ordem de tratamento das solicitações",
            "Princípio de responsabilidade única: cada handler faz uma coisa",
            "Novos handlers entram sem alterar o cliente",
        ],
        "contras": ["Algumas solicitações podem chegar ao fim da corrente sem tratamento"],
    },
    {
        "slug": "command",
        "nome": "Command",
        "categoria": COMPORTAMENTAL,
        "intencao": "Transforma uma solicitação em um objeto independente que contém todas as informações "
                    "sobre ela, permitindo enfileirar, registrar e desfazer operações.",
        "problema": "Um editor de texto tem botões, atalhos e menus que disparam as mesmas ações "
                    "(copiar, recortar, colar). Duplicar a lógica em cada elemento de interface torna "
                    "impossível oferecer desfazer e refazer de forma consistente.",
        "solucao": "Cada ação vira uma classe Command com executar() e desfazer(). O invoker guarda o "
                   "histórico de comandos executados e percorre essa pilha para desfazer ou refazer.",
        "estrutura": """
+-----------+     +---------------------+     +-----------+
| Aplicacao |---->| HistoricoDeComandos |---->|<<Command>>|
+-----------+     +---------------------+     | executar()|
                                              | desfazer()|
                                              +-----------+
                                                 ^     |
                            CopiarCommand, ColarCommand|
                            RecortarCommand            v
                                                  +--------+
                                                  | Editor |
                                                  +--------+
""",
        "pros": [
            "Desacopla quem invoca de quem executa",
            "Permite desfazer e refazer",
            "Comandos simples podem ser combinados em comandos compostos",
        ],
        "contras": ["Mais uma camada de classes entre o cliente e o receptor"],
    },
    {
        "slug": "iterator",
        "nome": "Iterator",
        "categoria": COMPORTAMENTAL,
        "intencao": "Permite percorrer os elementos de uma coleção sem expor sua representação interna.",
        "problema": "Uma árvore pode ser percorrida em profundidade ou em largura. Se o cliente "
                    "implementar cada percurso, passa a depender da estrutura interna da coleção.",
        "solucao": "Extrair o percurso para objetos iteradores. Todos seguem a mesma interface "
                   "(no Python, o protocolo __iter__/__next__) e guardam o próprio estado de navegação.",
        "estrutura": """
+------------------+         +------------------------+
|    NoArvore      |-------->|   <<TreeIterator>>     |
| + iterador(modo) |         | + tem_proximo()        |
| + __iter__()     |         | + __next__()           |
+------------------+         +------------------------+
                                  ^               ^
                  IteradorEmProfundidade   IteradorEmLargura
""",
        "pros": [
            "Algoritmos de percurso ficam fora da coleção",
            "Vários percursos podem acontecer ao mesmo tempo, cada um com seu estado",
        ],
        "contras": ["Exagero para coleções simples, que já são iteráveis"],
    },
    {
        "slug": "observer",
        "nome": "Observer",
        "categoria": COMPORTAMENTAL,
        "intencao": "Define um mecanismo de assinatura para notificar vários objetos sobre eventos "
                    "que acontecem no objeto observado.",
        "problema": "Canais de TV, jornais e leitores por email querem saber quando a agência publica "
                    "uma notícia. Consultar a agência o tempo todo é desperdício, e a agência avisar todo "
                    "mundo sem distinção incomoda quem não quer receber.",
        "solucao": "A agência mantém uma lista de observers e oferece métodos para adicionar e remover "
                   "assinantes. A cada publicação, percorre a lista chamando atualizar().",
        "estrutura": """
+------------------------+          +--------------+
|      NewsAgency        |<>------->| <<Observer>> |
| + adicionar_observer() |          | + atualizar()|
| + remover_observer()   |          +--------------+
| + notificar_observers()|            ^    ^     ^
+------------------------+     CanalDeTV Jornal AssinanteEmail
""",
        "pros": [
            "Novos assinantes sem alterar a agência",
            "Relações estabelecidas em tempo de execução",
        ],
        "contras": ["Assinantes são notificados em ordem de inscrição, não por prioridade"],
    },
    {
        "slug": "template-method",
        "nome": "Template Method",
        "categoria": COMPORTAMENTAL,
        "intencao": "Define o esqueleto de um algoritmo na superclasse e deixa as subclasses "
                    "sobrescreverem etapas específicas sem mudar sua estrutura.",
        "problema": "Mineradores de dados para CSV, DOC e PDF repetem abrir, extrair, analisar, "
                    "relatar e fechar. Só a extração e a interpretação mudam de formato para formato.",
        "solucao": "A classe base implementa minerar() chamando as etapas em ordem fixa. Etapas "
                   "específicas são abstratas; etapas comuns têm implementação padrão; hooks opcionais "
                   "permitem pular passos.",
        "estrutura": """
+---------------------------+
|    MineradorDeDados       |
| + minerar()  <<template>> |
| # abrir_arquivo()         |
| # extrair_dados()         |
| # parse_dados()           |
| # analisar()              |
| # deve_enviar_relatorio() |
| # fechar_arquivo()        |
+---------------------------+
     ^         ^         ^
MineradorCSV MineradorDOC MineradorPDF
""",
        "pros": [
            "Código duplicado sobe para a superclasse",
            "Clientes sobrescrevem apenas partes do algoritmo",
        ],
        "contras": [
            "O esqueleto fixo pode limitar algumas variações",
            "Quanto mais etapas, mais difícil manter",
        ],
    },
    {
        "slug": "mediator",
        "nome": "Mediator",
        "categoria": COMPORTAMENTAL,
        "intencao": "Reduz dependências caóticas entre objetos restringindo a comunicação direta "
                    "e forçando a colaboração por meio de um mediador.",
        "problema": "Aeronaves que disputam uma pista não podem negociar umas com as outras: "
                    "cada uma precisaria conhecer todas as demais.",
        "solucao": "A torre de controle centraliza os pedidos de pouso, enfileira quem precisa "
                   "esperar e avisa as demais aeronaves quando a pista muda de dono.",
        "estrutura": """
+----------+   notificar()   +----------------+
| Aeronave |---------------->| ControlTower   |
| (colega) |<----------------| (mediador)     |
+----------+    receber()    | fila de pouso  |
                             +----------------+
""",
        "pros": [
            "Comunicação entre componentes num único lugar",
            "Componentes ficam reutilizáveis",
        ],
        "contras": ["O mediador pode crescer até virar um objeto deus"],
    },
    {
        "slug": "visitor",
        "nome": "Visitor",
        "categoria": COMPORTAMENTAL,
        "intencao": "Separa algoritmos dos objetos sobre os quais operam.",
        "problema": "Exportar formas para XML ou calcular sua área exigiria adicionar métodos em "
                    "cada classe de forma, misturando responsabilidades.",
        "solucao": "Cada forma implementa aceitar(visitor), que chama o método do visitor específico "
                   "para seu tipo (double dispatch). Novas operações viram novos visitors.",
        "estrutura": """
+-------------------+          +---------------------+
|   <<Forma>>       |          |    <<Visitor>>      |
| + aceitar(v)      |--------->| visitar_ponto()     |
+-------------------+          | visitar_circulo()   |
  ^    ^    ^    ^             | visitar_retangulo() |
Ponto Circulo Retangulo        | visitar_composta()  |
        FormaComposta          +---------------------+
                                   ^            ^
                            ExportadorXML CalculadoraDeArea
""",
        "pros": [
            "Novas operações sem alterar as classes visitadas",
            "Comportamentos relacionados ficam juntos em um visitor",
        ],
        "contras": ["Cada nova classe de elemento exige atualizar todos os visitors"],
    },
    {
        "slug": "bridge",
        "nome": "Bridge",
        "categoria": ESTRUTURAL,
        "intencao": "Divide uma classe grande ou um conjunto de classes relacionadas em duas "
                    "hierarquias independentes: abstração e implementação.",
        "problema": "Controles remotos básicos e avançados para TVs e rádios gerariam uma classe "
                    "para cada combinação.",
        "solucao": "O controle (abstração) guarda uma referência para o dispositivo (implementação) "
                   "e delega o trabalho a ele. As duas hierarquias evoluem separadamente.",
        "estrutura": """
+------------------------+  dispositivo  +-----------------+
|    ControleRemoto      |<>------------>| <<Dispositivo>> |
+------------------------+               +-----------------+
          ^                                 ^          ^
+------------------------+                 TV        Radio
| ControleRemotoAvancado |
+------------------------+
""",
        "pros": [
            "Abstrações e implementações crescem de forma independente",
            "O cliente trabalha com abstrações de alto nível",
        ],
        "contras": ["Pode complicar um código que já era coeso"],
    },
    {
        "slug": "proxy",
        "nome": "Proxy",
        "categoria": ESTRUTURAL,
        "intencao": "Fornece um substituto que controla o acesso ao objeto original, permitindo "
                    "fazer algo antes ou depois de a solicitação chegar a ele.",
        "problema": "Um serviço de vídeo remoto é lento e repete consultas já feitas. Alguns usuários "
                    "não deveriam acessá-lo.",
        "solucao": "Proxies implementam a mesma interface do serviço: um guarda resultados em cache, "
                   "outro verifica permissões antes de repassar a chamada.",
        "estrutura": """
+-------------------+      +----------------------+
| GerenciadorVideos |----->|  <<ServicoDeVideo>>  |
+-------------------+      +----------------------+
                              ^        ^        ^
          ServicoDeVideoRemoto  ProxyComCache  ProxyDeProtecao
                 ^                   |               |
                 +-------------------+---------------+
""",
        "pros": [
            "Controla o objeto real sem que o cliente saiba",
            "Funciona mesmo que o serviço não esteja pronto ou disponível",
        ],
        "contras": ["A resposta pode atrasar por causa da camada extra"],
    },
    {
        "slug": "decorator",
        "nome": "Decorator",
        "categoria": ESTRUTURAL,
        "intencao": "Acopla novos comportamentos a objetos colocando-os dentro de invólucros que "
                    "contêm esses comportamentos.",
        "problema": "Notificações começaram só por email. Usuários querem SMS, Slack e Facebook em "
                    "qualquer combinação; uma subclasse por combinação é inviável.",
        "solucao": "Cada canal extra é um decorator que implementa a interface do notificador, "
                   "repassa a mensagem ao objeto embrulhado e acrescenta seu próprio envio.",
        "estrutura": """
+------------------+
| <<Notificador>>  |<-----------------+
| + enviar()       |                  | embrulha
+------------------+                  |
   ^            ^                     |
NotificadorEmail  NotificadorDecorator+
                    ^       ^        ^
      NotificadorSMS NotificadorSlack NotificadorFacebook
""",
        "pros": [
            "Estende comportamento sem criar subclasses",
            "Combina comportamentos empilhando decorators",
        ],
        "contras": [
            "Difícil remover um invólucro específico da pilha",
            "O comportamento depende da ordem dos decorators",
        ],
    },
    {
        "slug": "adapter",
        "nome": "Adapter",
        "categoria": ESTRUTURAL,
        "intencao": "Permite que objetos com interfaces incompatíveis colaborem entre si.",
        "problema": "Um buraco redondo só aceita pinos redondos, que informam o raio. Pinos "
                    "quadrados só conhecem a largura.",
        "solucao": "O adaptador herda a interface do pino redondo e converte a largura do pino "
                   "quadrado no raio do menor círculo que o contém.",
        "estrutura": """
+----------------+       +-------------+
| BuracoRedondo  |------>| PinoRedondo |
| + encaixa(p)   |       | + get_raio()|
+----------------+       +-------------+
                                ^
                  +-----------------------+      +--------------+
                  | AdaptadorPinoQuadrado |<>--->| PinoQuadrado |
                  +-----------------------+      +--------------+
""",
        "pros": [
            "Separa a conversão de interface da regra de negócio",
            "Novos adaptadores sem quebrar o cliente",
        ],
        "contras": ["Aumenta o número de classes"],
    },
    {
        "slug": "facade",
        "nome": "Facade",
        "categoria": ESTRUTURAL,
        "intencao": "Fornece uma interface simplificada para uma biblioteca, framework ou qualquer "
                    "conjunto complexo de classes.",
        "problema": "Converter um vídeo exige inicializar codecs, ler bitrate e mixar áudio na "
                    "ordem correta. O cliente fica acoplado a todos esses detalhes.",
        "solucao": "O conversor de vídeo expõe um único método converter() e coordena o subsistema "
                   "internamente.",
        "estrutura": """
+---------+     +------------------+
| Cliente |---->| ConversorDeVideo |
+---------+     +------------------+
                   |   |   |   |
   ArquivoDeVideo  |   |   |   MixadorDeAudio
        FabricaDeCodecs |  LeitorDeBitrate
                   CodecOgg / CodecMPEG4
""",
        "pros": ["Isola o cliente da complexidade do subsistema"],
        "contras": ["A fachada pode virar um objeto acoplado a tudo"],
    },
]

def create_tutoriais(db: Session):
    """Cria os tutoriais no banco"""
    repo = TutorialRepository(db)
    criados = []
    for dados in TUTORIAIS:
        if repo.get_by_slug(dados["slug"]):
            continue
        criados.append(repo.create_tutorial(**dados))

    if not criados:
        print("⚠️ Tutoriais já existem no banco, pulando criação...")
    return criados

def run_seeds(db: Session = None):
    """Executa todas as seeds"""
    print("🌱 Iniciando seeds...")
    sessao_propria = db is None
    if sessao_propria:
        init_db()
        db = SessionLocal()
    try:
        criados = create_tutoriais(db)
        print(f"✅ {len(criados)} tutoriais criados")
        return criados
    finally:
        if sessao_propria:
            db.close()

if __name__ == "__main__":
    run_seeds()
