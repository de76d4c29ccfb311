# tests/test_interpreter.py
import unittest
from unittest.mock import patch, MagicMock
from decimal import Decimal
import datetime
import time

from supabase import Client

from mtn import config
from mtn.core import interpreter
from mtn.core.models import CreateExpense, CreateGoal, Delegate, ExpenseCategory


class TestParseCommand(unittest.TestCase):

    def setUp(self):
        self.today = datetime.date(2025, 7, 7)

    def test_strict_expense_health(self):
        action = interpreter.parse_command("adicionar 50 reais em gastos médicos", today=self.today)
        self.assertIsInstance(action, CreateExpense)
        self.assertEqual(action.amount, Decimal("50"))
        self.assertEqual(action.description, "gastos médicos")
        self.assertEqual(action.category, ExpenseCategory.HEALTH)
        self.assertEqual(action.date, self.today)

    def test_strict_expense_is_case_insensitive(self):
        action = interpreter.parse_command("Adicionar 12.50 R$ com Comida no Restaurante", today=self.today)
        self.assertIsInstance(action, CreateExpense)
        self.assertEqual(action.amount, Decimal("12.50"))
        self.assertEqual(action.description, "comida no restaurante")
        self.assertEqual(action.category, ExpenseCategory.FOOD)

    def test_strict_expense_other_verb_forms(self):
        action = interpreter.parse_command("adicione 30 dollars para gasolina", today=self.today)
        self.assertIsInstance(action, CreateExpense)
        self.assertEqual(action.amount, Decimal("30"))
        self.assertEqual(action.description, "gasolina")
        self.assertEqual(action.category, ExpenseCategory.TRANSPORT)

    def test_strict_pattern_wins_over_loose_keyword(self):
        # "gastos" também dispara a regra solta, mas o valor extraído prevalece
        action = interpreter.parse_command("adicionar 50 reais para gastos", today=self.today)
        self.assertEqual(action.amount, Decimal("50"))
        self.assertEqual(action.description, "gastos")
        self.assertEqual(action.category, ExpenseCategory.OTHER)

    def test_loose_keyword_uses_fallback_values(self):
        action = interpreter.parse_command("tive muitos gastos hoje", today=self.today)
        self.assertIsInstance(action, CreateExpense)
        self.assertEqual(action.amount, config.FALLBACK_EXPENSE_AMOUNT)
        self.assertEqual(action.description, config.FALLBACK_EXPENSE_DESCRIPTION)
        self.assertEqual(action.category, ExpenseCategory.OTHER)

    def test_loose_keyword_still_infers_category(self):
        action = interpreter.parse_command("uma despesa de transporte", today=self.today)
        self.assertEqual(action.amount, config.FALLBACK_EXPENSE_AMOUNT)
        self.assertEqual(action.category, ExpenseCategory.TRANSPORT)

    def test_thousands_separator_is_not_handled(self):
        action = interpreter.parse_command("adicionar 1.000 reais em aluguel", today=self.today)
        self.assertEqual(action.amount, Decimal("1.000"))
        self.assertEqual(action.amount, Decimal("1"))

    def test_category_priority_health_first(self):
        self.assertEqual(interpreter.infer_category("consulta médica e comida"), ExpenseCategory.HEALTH)
        self.assertEqual(interpreter.infer_category("restaurante e gasolina"), ExpenseCategory.FOOD)
        self.assertEqual(interpreter.infer_category("nada a ver"), ExpenseCategory.OTHER)

    def test_goal_with_amount(self):
        action = interpreter.parse_command("criar meta de economizar 1000 reais", today=self.today)
        self.assertIsInstance(action, CreateGoal)
        self.assertEqual(action.amount, Decimal("1000"))
        self.assertEqual(action.current_amount, Decimal("0"))
        self.assertEqual(action.category, config.GOAL_CATEGORY)
        self.assertEqual(action.title, "Meta de economia de $1000")
        self.assertEqual(action.deadline, self.today + datetime.timedelta(days=config.GOAL_DEADLINE_DAYS))

    def test_goal_keyword_without_amount_falls_through(self):
        action = interpreter.parse_command("quero economizar", today=self.today)
        self.assertIsInstance(action, Delegate)
        self.assertEqual(action.utterance, "quero economizar")

    def test_goal_requires_economizar_sub_pattern(self):
        action = interpreter.parse_command("minha meta é 500 reais", today=self.today)
        self.assertIsInstance(action, Delegate)

    def test_expense_rule_evaluated_before_goal(self):
        action = interpreter.parse_command("economizar nos gastos 200 reais", today=self.today)
        self.assertIsInstance(action, CreateExpense)

    def test_unrelated_message_delegates_original_text(self):
        action = interpreter.parse_command("Como estão minhas finanças?", today=self.today)
        self.assertIsInstance(action, Delegate)
        self.assertEqual(action.utterance, "Como estão minhas finanças?")

    def test_long_message_without_preposition_is_fast(self):
        utterance = "adicionar" + " 1 reais" * 2000
        start = time.perf_counter()
        action = interpreter.parse_command(utterance, today=self.today)
        elapsed = time.perf_counter() - start
        self.assertIsInstance(action, Delegate)
        self.assertLess(elapsed, 1.0)

    def test_long_goal_message_is_fast(self):
        utterance = "meta de economizar" + " 1" * 8000
        start = time.perf_counter()
        action = interpreter.parse_command(utterance, today=self.today)
        self.assertLess(time.perf_counter() - start, 1.0)
        self.assertIsInstance(action, Delegate)

    def test_long_message_only_uses_keywords(self):
        padding = " blá" * config.MAX_COMMAND_LENGTH
        action = interpreter.parse_command("adicionar 50 reais em gastos médicos" + padding, today=self.today)
        self.assertIsInstance(action, CreateExpense)
        self.assertEqual(action.amount, config.FALLBACK_EXPENSE_AMOUNT)
        self.assertEqual(action.description, config.FALLBACK_EXPENSE_DESCRIPTION)
        self.assertEqual(action.category, ExpenseCategory.HEALTH)

    def test_today_defaults_to_current_date(self):
        action = interpreter.parse_command("tive muitos gastos hoje")
        self.assertEqual(action.date, datetime.date.today())


class TestInterpret(unittest.TestCase):

    def setUp(self):
        self.today = datetime.date(2025, 7, 7)
        # Mesmo esquema de encadeamento usado em test_db
        self.mock_supabase_client = MagicMock(spec=Client)
        self.mock_table_methods = MagicMock()
        self.mock_table_methods.insert.return_value = self.mock_table_methods
        self.mock_execute = MagicMock(data=[{'id': 'novo-id'}])
        self.mock_table_methods.execute.return_value = self.mock_execute
        self.mock_supabase_client.table.return_value = self.mock_table_methods

    @patch('mtn.core.ai.ask_assistant')
    def test_expense_creates_exactly_one_record(self, mock_ask):
        reply = interpreter.interpret(self.mock_supabase_client, "adicionar 50 reais em gastos médicos",
                                      user_id="user-1", today=self.today)

        self.assertEqual(reply, "✅ Gasto adicionado com sucesso! $50 em Saúde - gastos médicos")
        self.mock_supabase_client.table.assert_called_once_with('expenses')
        self.mock_table_methods.insert.assert_called_once()
        inserted = self.mock_table_methods.insert.call_args[0][0]
        self.assertEqual(inserted['amount'], 50.0)
        self.assertEqual(inserted['description'], "gastos médicos")
        self.assertEqual(inserted['category'], "Saúde")
        self.assertEqual(inserted['date'], "2025-07-07")
        self.assertEqual(inserted['user_id'], "user-1")
        mock_ask.assert_not_called()

    @patch('mtn.core.db.add_expense')
    def test_loose_expense_reply_uses_fallbacks(self, mock_add_expense):
        mock_add_expense.return_value = {'id': 'x'}
        reply = interpreter.interpret(self.mock_supabase_client, "tive muitos gastos hoje", today=self.today)
        self.assertEqual(reply, "✅ Gasto adicionado com sucesso! $100 em Outros - Despesa adicionada via assistente")
        kwargs = mock_add_expense.call_args.kwargs
        self.assertEqual(kwargs['amount'], config.FALLBACK_EXPENSE_AMOUNT)
        self.assertEqual(kwargs['description'], config.FALLBACK_EXPENSE_DESCRIPTION)

    @patch('mtn.core.db.add_expense')
    def test_same_message_twice_creates_two_records(self, mock_add_expense):
        mock_add_expense.return_value = {'id': 'x'}
        interpreter.interpret(self.mock_supabase_client, "adicionar 50 reais em gastos médicos", today=self.today)
        interpreter.interpret(self.mock_supabase_client, "adicionar 50 reais em gastos médicos", today=self.today)
        self.assertEqual(mock_add_expense.call_count, 2)

    @patch('mtn.core.ai.ask_assistant')
    def test_expense_failure_returns_fixed_reply(self, mock_ask):
        self.mock_table_methods.execute.side_effect = Exception("Database connection error")
        reply = interpreter.interpret(self.mock_supabase_client, "adicionar 50 reais em gastos médicos", today=self.today)
        self.assertEqual(reply, interpreter.EXPENSE_FAILURE_REPLY)
        self.mock_table_methods.insert.assert_called_once()
        mock_ask.assert_not_called()

    @patch('mtn.core.db.add_expense')
    @patch('mtn.core.db.add_goal')
    def test_goal_creation(self, mock_add_goal, mock_add_expense):
        mock_add_goal.return_value = {'id': 'meta-1'}
        reply = interpreter.interpret(self.mock_supabase_client, "criar meta de economizar 1000 reais", today=self.today)

        self.assertEqual(reply, "✅ Meta criada com sucesso! Objetivo de economizar $1000")
        mock_add_goal.assert_called_once()
        mock_add_expense.assert_not_called()
        kwargs = mock_add_goal.call_args.kwargs
        self.assertEqual(kwargs['target_amount'], Decimal("1000"))
        self.assertEqual(kwargs['current_amount'], Decimal("0"))
        self.assertEqual(kwargs['category'], "Poupança")
        self.assertEqual(kwargs['deadline'], datetime.date(2026, 7, 7))

    @patch('mtn.core.db.add_goal')
    def test_goal_failure_returns_fixed_reply(self, mock_add_goal):
        mock_add_goal.return_value = None
        reply = interpreter.interpret(self.mock_supabase_client, "criar meta de economizar 1000 reais", today=self.today)
        self.assertEqual(reply, interpreter.GOAL_FAILURE_REPLY)

    @patch('mtn.core.db.add_goal')
    @patch('mtn.core.ai.ask_assistant')
    def test_goal_without_amount_goes_to_assistant(self, mock_ask, mock_add_goal):
        mock_ask.return_value = "Ótima ideia! Quanto você quer economizar?"
        reply = interpreter.interpret(self.mock_supabase_client, "quero economizar")
        self.assertEqual(reply, "Ótima ideia! Quanto você quer economizar?")
        mock_add_goal.assert_not_called()
        self.mock_supabase_client.table.assert_not_called()

    @patch('mtn.core.ai.ask_assistant')
    def test_delegate_returns_completion_verbatim(self, mock_ask):
        mock_ask.return_value = "  Suas finanças estão ótimas! 📈  "
        reply = interpreter.interpret(self.mock_supabase_client, "como estão minhas finanças?")
        self.assertEqual(reply, "  Suas finanças estão ótimas! 📈  ")
        mock_ask.assert_called_once_with("como estão minhas finanças?", config.ASSISTANT_CONTEXT_TAG)
        self.mock_supabase_client.table.assert_not_called()

    @patch('mtn.core.ai.ask_assistant')
    def test_completion_failure_returns_apology(self, mock_ask):
        mock_ask.return_value = None
        reply = interpreter.interpret(self.mock_supabase_client, "como estão minhas finanças?")
        self.assertEqual(
            reply,
            "Desculpe, ocorreu um erro. Tente novamente ou use comandos simples como "
            "'adicionar 50 reais em gastos médicos'."
        )


if __name__ == '__main__':
    unittest.main()
