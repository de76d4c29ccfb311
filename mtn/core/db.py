# mtn/core/db.py
import datetime
from decimal import Decimal
from typing import Union, Dict, Any, List

from supabase import create_client, Client
from mtn.config import SUPABASE_URL, SUPABASE_KEY


def get_supabase_client() -> Client:
    """Retorna uma instância do cliente Supabase."""
    return create_client(SUPABASE_URL, SUPABASE_KEY)


def _to_number(value: Union[Decimal, float, int]) -> float:
    # O payload do Supabase é JSON; Decimal não é serializável.
    return float(value)


def _to_date_str(value: Union[datetime.date, str]) -> str:
    if isinstance(value, datetime.date):
        return value.strftime("%Y-%m-%d")
    return value


# --- Funções para Gastos ---
def add_expense(supabase_client: Client, amount: Union[Decimal, float], description: str, category: str,
                date: Union[datetime.date, str], user_id: Union[str, None] = None) -> Union[Dict[str, Any], None]:
    """Adiciona um novo gasto ao Supabase. Retorna a linha criada ou None em caso de erro."""
    payload = {
        "amount": _to_number(amount),
        "description": description,
        "category": category,
        "date": _to_date_str(date),
    }
    if user_id:
        payload["user_id"] = user_id
    try:
        response = supabase_client.table('expenses').insert(payload).execute()
        if not response.data:
            print(f"Erro ao adicionar gasto ao Supabase: resposta vazia para {payload}")
            return None
        return response.data[0]
    except Exception as e:
        print(f"Erro ao adicionar gasto ao Supabase: {e}")
        return None


def get_expenses(supabase_client: Client, user_id: Union[str, None] = None) -> list:
    """Obtém os gastos do Supabase, do mais recente para o mais antigo."""
    try:
        query = supabase_client.table('expenses').select('*')
        if user_id:
            query = query.eq('user_id', user_id)
        response = query.order('date', desc=True).execute()
        return response.data or []
    except Exception as e:
        print(f"Erro ao obter gastos do Supabase: {e}")
        return []


def delete_expense(supabase_client: Client, expense_id: str) -> bool:
    """Remove um gasto pelo ID."""
    try:
        response = supabase_client.table('expenses').delete().eq('id', expense_id).execute()
        if not response.data:
            print(f"Gasto {expense_id} não encontrado para remoção.")
            return False
        return True
    except Exception as e:
        print(f"Erro ao remover gasto {expense_id} do Supabase: {e}")
        return False


# --- Funções para Metas ---
def add_goal(supabase_client: Client, title: str, target_amount: Union[Decimal, float], category: str,
             deadline: Union[datetime.date, str, None], current_amount: Union[Decimal, float] = 0,
             user_id: Union[str, None] = None) -> Union[Dict[str, Any], None]:
    """Cria uma nova meta no Supabase. Retorna a linha criada ou None em caso de erro."""
    payload = {
        "title": title,
        "target_amount": _to_number(target_amount),
        "current_amount": _to_number(current_amount),
        "category": category,
        "deadline": _to_date_str(deadline) if deadline else None,
    }
    if user_id:
        payload["user_id"] = user_id
    try:
        response = supabase_client.table('goals').insert(payload).execute()
        if not response.data:
            print(f"Erro ao criar meta no Supabase: resposta vazia para {payload}")
            return None
        return response.data[0]
    except Exception as e:
        print(f"Erro ao criar meta no Supabase: {e}")
        return None


def get_goals(supabase_client: Client, user_id: Union[str, None] = None) -> list:
    """Obtém as metas do Supabase, das mais novas para as mais antigas."""
    try:
        query = supabase_client.table('goals').select('*')
        if user_id:
            query = query.eq('user_id', user_id)
        response = query.order('created_at', desc=True).execute()
        return response.data or []
    except Exception as e:
        print(f"Erro ao obter metas do Supabase: {e}")
        return []


def get_goal_by_id(supabase_client: Client, goal_id: str) -> Union[Dict[str, Any], None]:
    """Obtém uma meta pelo ID."""
    try:
        response = supabase_client.table('goals').select('*').eq('id', goal_id).execute()
        return response.data[0] if response.data else None
    except Exception as e:
        print(f"Erro ao buscar meta {goal_id} no Supabase: {e}")
        return None


def update_goal(supabase_client: Client, goal_id: str, updates: Dict[str, Any]) -> Union[Dict[str, Any], None]:
    """Atualiza campos de uma meta. Retorna a linha atualizada ou None."""
    try:
        response = supabase_client.table('goals').update(updates).eq('id', goal_id).execute()
        return response.data[0] if response.data else None
    except Exception as e:
        print(f"Erro ao atualizar meta {goal_id}: {e}")
        return None


def contribute_to_goal(supabase_client: Client, goal: Dict[str, Any], amount: Union[Decimal, float]) -> Union[Dict[str, Any], None]:
    """
    Soma um aporte ao valor atual da meta, sem ultrapassar o valor alvo.
    """
    current = Decimal(str(goal.get('current_amount') or 0))
    target = Decimal(str(goal['target_amount']))
    new_amount = min(current + Decimal(str(amount)), target)
    return update_goal(supabase_client, goal['id'], {'current_amount': _to_number(new_amount)})


def delete_goal(supabase_client: Client, goal_id: str) -> bool:
    """Remove uma meta pelo ID."""
    try:
        response = supabase_client.table('goals').delete().eq('id', goal_id).execute()
        if not response.data:
            print(f"Meta {goal_id} não encontrada para remoção.")
            return False
        return True
    except Exception as e:
        print(f"Erro ao remover meta {goal_id} do Supabase: {e}")
        return False


# --- Funções para Investimentos ---
def add_investment(supabase_client: Client, ticker: str, name: str, shares: Union[Decimal, float], price: Union[Decimal, float],
                   purchase_date: Union[datetime.date, str, None] = None, sector: Union[str, None] = None,
                   user_id: Union[str, None] = None) -> Union[Dict[str, Any], None]:
    """Registra um ativo na carteira. Retorna a linha criada ou None em caso de erro."""
    payload = {
        "ticker": ticker.upper(),
        "name": name,
        "shares": _to_number(shares),
        "price": _to_number(price),
        "sector": sector,
    }
    if purchase_date:
        payload["purchase_date"] = _to_date_str(purchase_date)
    if user_id:
        payload["user_id"] = user_id
    try:
        response = supabase_client.table('investments').insert(payload).execute()
        if not response.data:
            print(f"Erro ao adicionar investimento ao Supabase: resposta vazia para {payload}")
            return None
        return response.data[0]
    except Exception as e:
        print(f"Erro ao adicionar investimento ao Supabase: {e}")
        return None


def get_investments(supabase_client: Client, user_id: Union[str, None] = None) -> list:
    """Obtém os investimentos do Supabase, dos mais novos para os mais antigos."""
    try:
        query = supabase_client.table('investments').select('*')
        if user_id:
            query = query.eq('user_id', user_id)
        response = query.order('created_at', desc=True).execute()
        return response.data or []
    except Exception as e:
        print(f"Erro ao obter investimentos do Supabase: {e}")
        return []


def delete_investment(supabase_client: Client, investment_id: str) -> bool:
    """Remove um investimento pelo ID."""
    try:
        response = supabase_client.table('investments').delete().eq('id', investment_id).execute()
        if not response.data:
            print(f"Investimento {investment_id} não encontrado para remoção.")
            return False
        return True
    except Exception as e:
        print(f"Erro ao remover investimento {investment_id} do Supabase: {e}")
        return False
