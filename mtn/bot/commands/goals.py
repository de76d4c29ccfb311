from decimal import Decimal, InvalidOperation

from telegram import Update
from telegram.ext import ContextTypes
from mtn.core import db
from mtn.utils.text_utils import format_brl


def goal_progress(goal: dict) -> float:
    """Percentual atingido da meta, entre 0 e 100."""
    target = float(goal.get("target_amount") or 0)
    if target <= 0:
        return 0.0
    return min(float(goal.get("current_amount") or 0) / target * 100, 100.0)


async def list_goals_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Lista as metas com o progresso de cada uma."""
    supabase_client = context.bot_data["supabase_client"]
    metas = db.get_goals(supabase_client, user_id=context.bot_data.get("owner_id"))

    if not metas:
        await update.message.reply_text(
            "Nenhuma meta criada ainda. Tente: `criar meta de economizar 1000 reais`"
        )
        return

    message = "**Suas metas:**\n\n"
    for meta in metas:
        prazo = f" até {meta['deadline']}" if meta.get("deadline") else ""
        message += (
            f"• {meta.get('title')}: {format_brl(meta.get('current_amount'))} de "
            f"{format_brl(meta.get('target_amount'))} ({goal_progress(meta):.0f}%){prazo} `{meta.get('id')}`\n"
        )
    await update.message.reply_text(message, parse_mode="Markdown")


async def contribute_goal_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Soma um aporte ao progresso de uma meta."""
    supabase_client = context.bot_data["supabase_client"]

    if not context.args or len(context.args) < 2:
        await update.message.reply_text("Uso: `/depositar_meta [id] [valor]`\nEx: `/depositar_meta 1a2b 150`")
        return

    goal_id = context.args[0].strip()
    try:
        amount = Decimal(context.args[1].replace(",", "."))
    except InvalidOperation:
        await update.message.reply_text("Valor inválido. Use um número, ex: `150` ou `150.50`.")
        return

    if not amount.is_finite() or amount <= 0:
        await update.message.reply_text("O valor do aporte precisa ser maior que zero.")
        return

    meta = db.get_goal_by_id(supabase_client, goal_id)
    if not meta:
        await update.message.reply_text(f"Meta '{goal_id}' não encontrada. Use `/metas` para ver as existentes.")
        return

    atualizada = db.contribute_to_goal(supabase_client, meta, amount)
    if atualizada:
        await update.message.reply_text(
            f"💰 Aporte registrado! {atualizada.get('title')}: "
            f"{format_brl(atualizada.get('current_amount'))} de {format_brl(atualizada.get('target_amount'))}"
        )
    else:
        await update.message.reply_text("❌ Erro ao atualizar meta. Tente novamente.")


async def delete_goal_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Remove uma meta pelo ID."""
    supabase_client = context.bot_data["supabase_client"]

    if not context.args:
        await update.message.reply_text("Uso: `/remover_meta [id]`\nO ID aparece em `/metas`.")
        return

    if db.delete_goal(supabase_client, context.args[0].strip()):
        await update.message.reply_text("🗑️ Meta removida com sucesso!")
    else:
        await update.message.reply_text("❌ Erro ao remover meta. Tente novamente.")
