"""
Keyword rule table for automatic transaction categorization.
Rules built from common Brazilian bank statement descriptions.
"""

# Category rules keyed by stable internal identifier.
# confidence is the ceiling any match against the rule can report (0-100);
# priority breaks ties between rules (higher wins).
KEYWORD_DATABASE = {
    "alimentacao": {
        "name": "Alimentação",
        "type": "expense",
        "keywords": [
            "supermercado", "supermercado extra", "mercadinho", "mercearia", "hortifruti",
            "padaria", "panificadora", "açougue", "lanche", "lanchonete", "pastelaria",
            "salgados", "cachorro quente", "hamburguer", "hamburgueria", "pizza", "pizzaria",
            "esfiharia", "restaurante", "self-service", "self service", "churrascaria",
            "buffet", "marmita", "almoço", "jantar", "bar", "boteco", "pub", "cervejaria",
            "adega", "chopp", "delivery", "ifood", "ubereats", "rappi", "mcdonalds",
            "burger king", "subway", "starbucks", "café", "hambúrguer", "comida", "food",
            "mercado",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "transporte": {
        "name": "Transporte",
        "type": "expense",
        "keywords": [
            "posto", "gasolina", "alcool", "etanol", "diesel", "combustivel", "petro",
            "shell", "ipiranga", "br", "uber", "99", "cabify", "blablacar", "passagem",
            "onibus", "rodoviaria", "metro", "trem", "bilhete unico", "estacionamento",
            "parquimetro", "valet", "pedagio", "recarga bilhete", "taxi", "combustível",
            "transporte", "ipva", "licenciamento", "multa",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "compras": {
        "name": "Compras",
        "type": "expense",
        "keywords": [
            "shopping", "loja", "lojas americanas", "magazine", "extra", "carrefour",
            "atacadao", "mercado livre", "amazon", "submarino", "shopee", "aliexpress",
            "roupas", "vestuario", "moda", "calcados", "tenis", "sapato", "boutique",
            "farmacia", "drogaria", "drogasil", "raia", "panvel", "medicacao", "remedio",
            "cosmetico", "perfumaria", "maquiagem", "eletronico", "celular", "notebook",
            "informatica", "eletrodomestico", "moveis", "decoracao", "construcao",
            "material de construcao", "ferramenta",
        ],
        "confidence": 90,
        "priority": 8,
    },

    "saude": {
        "name": "Saúde",
        "type": "expense",
        "keywords": [
            "farmacia", "drogaria", "medicamento", "remedio", "antibiotico", "generico",
            "hospital", "clinica", "laboratorio", "exame", "consulta", "pronto socorro",
            "plano de saude", "unimed", "hapvida", "amil", "sulamerica", "odontologia",
            "dentista", "tratamento", "ortodontia", "aparelho", "fisioterapia",
            "psicologo", "psiquiatra", "nutricionista", "terapia", "farmácia", "clínica",
            "médico", "saúde", "saude",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "educacao": {
        "name": "Educação",
        "type": "expense",
        "keywords": [
            "escola", "colegio", "faculdade", "universidade", "cursinho", "vestibular",
            "enem", "curso", "treinamento", "capacitação", "ead", "online", "udemy",
            "alura", "coursera", "senac", "senai", "fundacao", "instituto",
            "material escolar", "livraria", "papelaria", "caderno", "livro", "apostila",
            "caneta", "lapis", "mochila", "educação",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "servicos": {
        "name": "Serviços",
        "type": "expense",
        "keywords": [
            "corte", "salao", "cabeleireiro", "barbeiro", "manicure", "pedicure",
            "estetica", "assinatura", "mensalidade", "fatura", "anuidade", "cobranca",
            "netflix", "spotify", "amazon prime", "disney", "hbo", "globoplay", "deezer",
            "tidal", "paramount", "youtube premium", "academia", "crossfit", "pilates",
            "yoga", "personal trainer", "manutencao", "conserto", "assistencia",
            "tecnico", "instalacao", "seguro", "seguradora", "cartorio", "consorcio",
        ],
        "confidence": 90,
        "priority": 8,
    },

    "moradia": {
        "name": "Moradia",
        "type": "expense",
        "keywords": [
            "aluguel", "imobiliaria", "condominio", "sindico", "conta de luz", "energia",
            "cemig", "enel", "eletropaulo", "copel", "ceee", "equatorial", "conta de agua",
            "sabesp", "caesb", "sanepar", "copasa", "internet", "vivo", "claro", "oi",
            "tim", "net", "sky", "gvt", "telefonia", "telefone fixo", "gás", "botijao",
            "ultragaz", "supergasbras", "nacional gas", "luz", "água", "telefone",
            "financiamento", "condomínio", "imóvel",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "lazer": {
        "name": "Lazer",
        "type": "expense",
        "keywords": [
            "cinema", "ingresso", "show", "espetaculo", "teatro", "balada", "festa",
            "evento", "parque", "diversao", "jogos", "fliperama", "viagem", "turismo",
            "agencia", "hotel", "pousada", "airbnb", "resort", "bar", "pub", "karaoke",
            "boliche", "paintball", "entretenimento",
        ],
        "confidence": 90,
        "priority": 8,
    },

    "investimentos": {
        "name": "Investimentos",
        "type": "expense",
        "keywords": [
            "rdb", "cdb", "tesouro", "lci", "lca", "acoes", "bolsa", "b3", "fii", "fundos",
            "aplicacao", "aplicacao rdb", "investimento", "aporte", "resgate", "saque",
            "retirada", "previdencia", "previdencia privada", "poupanca", "cripto",
            "bitcoin", "ethereum", "binance", "corretora", "xp", "clear", "modal", "btg",
            "bradesco investimentos", "ação", "acao", "dividendo", "rendimento", "juros",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "transferencias": {
        "name": "Transferências",
        "type": "income",
        "keywords": [
            "pix", "pix enviado", "pix recebido", "transferencia enviada",
            "transferencia recebida", "ted", "doc", "transferencia bancaria", "deposito",
            "saque", "boleto", "boleto pago", "boleto recebido", "resgate rdb",
            "aplicacao rdb", "estorno", "pagamento", "pag seguro", "paypal",
            "mercadopago", "pagarme", "transferência", "transferência recebida",
            "transferência enviada",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "impostos": {
        "name": "Impostos e Taxas",
        "type": "expense",
        "keywords": [
            "ipva", "iptu", "ir", "imposto de renda", "taxa", "multa", "juros", "encargos",
            "tarifa", "taxa bancaria", "manutencao de conta", "anuidade cartao",
            "sindicato", "contribuicao", "darf", "gps", "mei",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "salario": {
        "name": "Salário",
        "type": "income",
        "keywords": [
            "salário", "salario", "pagamento", "depósito", "deposito", "renda", "receita",
        ],
        "confidence": 95,
        "priority": 10,
    },

    "freelance": {
        "name": "Freelance",
        "type": "income",
        "keywords": [
            "freelance", "bico", "projeto", "trabalho", "serviço", "servico",
        ],
        "confidence": 90,
        "priority": 8,
    },

    "outros": {
        "name": "Outros",
        "type": "expense",
        "keywords": [
            "diversos", "outros", "nao identificado", "despesa generica", "sem descricao",
            "outros gastos",
        ],
        "confidence": 50,
        "priority": 1,
    },
}


# Regex patterns bound to a fixed category and confidence.
# Evaluated in order against the full rule table, regardless of transaction type.
REGEX_PATTERNS = [
    {
        "pattern": r"transfer[êe]ncia\s+(recebida|enviada)",
        "category": "Transferências",
        "confidence": 95,
    },
    {
        "pattern": r"pix\s+(recebido|enviado)",
        "category": "Transferências",
        "confidence": 95,
    },
    {
        "pattern": r"boleto\s+(pago|recebido)",
        "category": "Transferências",
        "confidence": 90,
    },
    {
        "pattern": r"dep[óo]sito",
        "category": "Transferências",
        "confidence": 90,
    },
    {
        "pattern": r"saque",
        "category": "Transferências",
        "confidence": 85,
    },
    {
        "pattern": r"sal[áa]rio",
        "category": "Salário",
        "confidence": 95,
    },
    {
        "pattern": r"freelance|bico|projeto",
        "category": "Freelance",
        "confidence": 90,
    },
]
