"""
Lexical signals used to detect a wrong income/expense type on a transaction.

Every list here is ordered: the first entry that matches a description wins,
so entries must not be reordered casually.
"""

# Phrase -> expected type. Checked first, top to bottom.
TYPE_CORRECTION_RULES = [
    # Clear expenses
    ("compra no", "expense"),
    ("pagamento de", "expense"),
    ("débito automático", "expense"),
    ("boleto pago", "expense"),
    ("taxa de", "expense"),
    ("anuidade", "expense"),
    ("mensalidade", "expense"),
    ("aluguel", "expense"),
    ("financiamento", "expense"),
    ("cartão de crédito", "expense"),
    ("saque", "expense"),
    ("retirada", "expense"),
    ("transferência enviada", "expense"),
    ("pix enviado", "expense"),
    ("ted enviado", "expense"),

    # Clear income
    ("salário", "income"),
    ("salario", "income"),
    ("depósito", "income"),
    ("deposito", "income"),
    ("transferência recebida", "income"),
    ("transferencia recebida", "income"),
    ("pix recebido", "income"),
    ("ted recebido", "income"),
    ("estorno", "income"),
    ("rendimento", "income"),
    ("juros", "income"),
    ("dividendos", "income"),
    ("freelance", "income"),
    ("venda", "income"),
    ("recebimento", "income"),
]

# Words that indicate money leaving the account. Checked before INCOME_INDICATORS.
EXPENSE_INDICATORS = [
    "compra", "pagamento", "débito", "saque", "retirada", "cobrança",
    "fatura", "boleto pago", "cartão", "débito automático", "desconto",
    "taxa", "tarifa", "anuidade", "mensalidade", "aluguel", "financiamento",
]

# Words that indicate money entering the account.
INCOME_INDICATORS = [
    "recebimento", "crédito", "depósito", "deposito", "salário", "salario",
    "transferência recebida", "transferencia recebida", "pix recebido",
    "estorno", "rendimento", "juros", "dividendos", "freelance", "venda",
]

# Directional phrases, checked last: (subject words, direction words, type).
DIRECTIONAL_RULES = [
    (("pix",), ("enviado", "pagamento"), "expense"),
    (("pix",), ("recebido",), "income"),
    (("transferência", "transferencia"), ("enviada", "saída", "saida"), "expense"),
    (("transferência", "transferencia"), ("recebida", "entrada"), "income"),
]

# Words that contradict a category of the opposite type (consistency warnings).
INCOME_CONTRADICTION_WORDS = ["recebido", "depósito", "deposito"]
EXPENSE_CONTRADICTION_WORDS = ["pagamento", "débito", "saque"]
