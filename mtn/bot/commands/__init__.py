# mtn/bot/commands/__init__.py

from .utils import start_command, help_command
from .expenses import list_expenses_command, delete_expense_command
from .goals import list_goals_command, contribute_goal_command, delete_goal_command
from .investments import list_investments_command, add_investment_command, delete_investment_command

ALL_COMMANDS = {
    "start": start_command,
    "help": help_command,
    "gastos": list_expenses_command,
    "remover_gasto": delete_expense_command,
    "metas": list_goals_command,
    "depositar_meta": contribute_goal_command,
    "remover_meta": delete_goal_command,
    "investimentos": list_investments_command,
    "adicionar_investimento": add_investment_command,
    "remover_investimento": delete_investment_command,
}
