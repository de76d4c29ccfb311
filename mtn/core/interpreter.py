# mtn/core/interpreter.py
"""
Interpretador de comandos do assistente MTN.

Classifica uma mensagem livre em uma ação estruturada (criar gasto, criar meta)
ou a repassa ao Gemini. A classificação (parse_command) é pura; o despacho
(interpret) faz no máximo uma chamada externa e sempre devolve um texto.

Limitação conhecida: valores são lidos como decimais com ponto, sem separador
de milhar. "1.000 reais" vira 1, e não mil.

Os padrões de comando só rodam em mensagens de até MAX_COMMAND_LENGTH
caracteres; acima disso valem apenas as palavras-chave.
"""
import re
import datetime
from decimal import Decimal
from typing import Callable, List, Tuple, Union

from supabase import Client

from mtn.config import (
    FALLBACK_EXPENSE_AMOUNT,
    FALLBACK_EXPENSE_DESCRIPTION,
    GOAL_DEADLINE_DAYS,
    GOAL_CATEGORY,
    ASSISTANT_CONTEXT_TAG,
    MAX_COMMAND_LENGTH,
)
from mtn.core import ai
from mtn.core import db
from mtn.core.models import CreateExpense, CreateGoal, Delegate, ExpenseCategory, ParsedAction
from mtn.utils.text_utils import format_amount

CURRENCY = r"(?:reais|real|dollars?|r\$|\$)"
AMOUNT = r"(\d+(?:\.\d+)?)"

EXPENSE_PATTERN = re.compile(rf"adicion.* {AMOUNT}.* {CURRENCY}.* (?:em|para|de|com) (.+)")
GOAL_PATTERN = re.compile(rf"economizar.* {AMOUNT}.* {CURRENCY}")


def _search(pattern, lower: str):
    # Os .* gulosos tornam o casamento cúbico no tamanho da mensagem
    if len(lower) > MAX_COMMAND_LENGTH:
        return None
    return pattern.search(lower)


EXPENSE_KEYWORDS = ("gastos", "despesa")
GOAL_KEYWORDS = ("meta", "objetivo", "economizar")

# Ordem importa: a primeira regra que casar vence.
CATEGORY_RULES = [
    (("médic",), ExpenseCategory.HEALTH),
    (("comida", "restaurante"), ExpenseCategory.FOOD),
    (("transporte", "gasolina"), ExpenseCategory.TRANSPORT),
]

EXPENSE_FAILURE_REPLY = "❌ Erro ao adicionar gasto. Tente novamente."
GOAL_FAILURE_REPLY = "❌ Erro ao criar meta. Tente novamente."
COMPLETION_FAILURE_REPLY = (
    "Desculpe, ocorreu um erro. Tente novamente ou use comandos simples como "
    "'adicionar 50 reais em gastos médicos'."
)


def infer_category(text: str) -> str:
    """Deduz a categoria do gasto por palavras-chave na mensagem inteira."""
    lower = text.lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lower for keyword in keywords):
            return category
    return ExpenseCategory.OTHER


def _is_expense(lower: str) -> bool:
    return bool(_search(EXPENSE_PATTERN, lower)) or any(k in lower for k in EXPENSE_KEYWORDS)


def _extract_expense(lower: str, today: datetime.date) -> CreateExpense:
    match = _search(EXPENSE_PATTERN, lower)
    if match:
        amount = Decimal(match.group(1))
        description = match.group(2)
    else:
        # Só a palavra-chave casou: usa os valores padrão
        amount = FALLBACK_EXPENSE_AMOUNT
        description = FALLBACK_EXPENSE_DESCRIPTION
    return CreateExpense(amount=amount, description=description, category=infer_category(lower), date=today)


def _is_goal(lower: str) -> bool:
    # Sem valor legível, nenhuma meta é criada e a mensagem segue para o Gemini.
    return any(k in lower for k in GOAL_KEYWORDS) and bool(_search(GOAL_PATTERN, lower))


def _extract_goal(lower: str, today: datetime.date) -> CreateGoal:
    amount = Decimal(_search(GOAL_PATTERN, lower).group(1))
    return CreateGoal(
        amount=amount,
        title=f"Meta de economia de ${format_amount(amount)}",
        category=GOAL_CATEGORY,
        deadline=today + datetime.timedelta(days=GOAL_DEADLINE_DAYS),
    )


RULES: List[Tuple[Callable[[str], bool], Callable[[str, datetime.date], ParsedAction]]] = [
    (_is_expense, _extract_expense),
    (_is_goal, _extract_goal),
]


def parse_command(utterance: str, today: Union[datetime.date, None] = None) -> ParsedAction:
    """Classifica a mensagem em CreateExpense, CreateGoal ou Delegate."""
    today = today or datetime.date.today()
    lower = utterance.lower()
    for predicate, extractor in RULES:
        if predicate(lower):
            return extractor(lower, today)
    return Delegate(utterance)


def interpret(supabase_client: Client, utterance: str, user_id: Union[str, None] = None,
              today: Union[datetime.date, None] = None) -> str:
    """
    Interpreta uma mensagem do usuário e devolve a resposta do assistente.

    Nenhuma exceção sai daqui: falhas do banco ou do Gemini viram mensagens fixas.
    Não há deduplicação; a mesma mensagem enviada duas vezes cria dois registros.
    """
    action = parse_command(utterance, today)
    print(f"DEBUG: Mensagem classificada como {action!r}")

    if isinstance(action, CreateExpense):
        created = db.add_expense(
            supabase_client,
            amount=action.amount,
            description=action.description,
            category=action.category,
            date=action.date,
            user_id=user_id,
        )
        if created is None:
            return EXPENSE_FAILURE_REPLY
        return f"✅ Gasto adicionado com sucesso! ${format_amount(action.amount)} em {action.category} - {action.description}"

    if isinstance(action, CreateGoal):
        created = db.add_goal(
            supabase_client,
            title=action.title,
            target_amount=action.amount,
            current_amount=action.current_amount,
            category=action.category,
            deadline=action.deadline,
            user_id=user_id,
        )
        if created is None:
            return GOAL_FAILURE_REPLY
        return f"✅ Meta criada com sucesso! Objetivo de economizar ${format_amount(action.amount)}"

    reply = ai.ask_assistant(action.utterance, ASSISTANT_CONTEXT_TAG)
    if reply is None:
        return COMPLETION_FAILURE_REPLY
    return reply
