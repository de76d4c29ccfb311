# mtn/core/models.py
from datetime import date
from decimal import Decimal

# Modelos conceituais. As tabelas 'expenses', 'goals' e 'investments' do Supabase
# continuam sendo lidas e escritas como dicionários em db.py.


class ExpenseCategory:
    """Categorias de gasto reconhecidas pelo assistente (valores gravados no banco)."""

    HEALTH = "Saúde"
    FOOD = "Alimentação"
    TRANSPORT = "Transporte"
    OTHER = "Outros"


# --- Ações produzidas pelo interpretador de comandos ---

class ParsedAction:
    """Resultado da classificação de uma mensagem. Nunca é persistido."""


class CreateExpense(ParsedAction):
    def __init__(self, amount: Decimal, description: str, category: str, date: date):
        self.amount = amount
        self.description = description
        self.category = category
        self.date = date

    def __repr__(self):
        return f"CreateExpense(amount={self.amount!r}, description={self.description!r}, category={self.category!r}, date={self.date!r})"


class CreateGoal(ParsedAction):
    def __init__(self, amount: Decimal, title: str, category: str, deadline: date):
        self.amount = amount
        self.title = title
        self.category = category
        self.deadline = deadline
        self.current_amount = Decimal("0")

    def __repr__(self):
        return f"CreateGoal(amount={self.amount!r}, title={self.title!r}, deadline={self.deadline!r})"


class Delegate(ParsedAction):
    def __init__(self, utterance: str):
        self.utterance = utterance

    def __repr__(self):
        return f"Delegate(utterance={self.utterance!r})"
