from telegram import Update
from telegram.ext import ContextTypes
from mtn.core import db
from mtn.utils.text_utils import format_brl

MAX_LISTED_EXPENSES = 10


async def list_expenses_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Lista os gastos mais recentes do usuário."""
    supabase_client = context.bot_data["supabase_client"]
    gastos = db.get_expenses(supabase_client, user_id=context.bot_data.get("owner_id"))

    if not gastos:
        await update.message.reply_text(
            "Nenhum gasto registrado ainda. Tente: `adicionar 50 reais em gastos médicos`"
        )
        return

    message = "**Seus gastos mais recentes:**\n\n"
    for gasto in gastos[:MAX_LISTED_EXPENSES]:
        descricao = gasto.get("description") or "Sem descrição"
        categoria = gasto.get("category") or "Outros"
        message += f"• {format_brl(gasto.get('amount'))} {descricao} ({categoria}) em {gasto.get('date')} `{gasto.get('id')}`\n"

    total = sum(float(gasto.get("amount") or 0) for gasto in gastos)
    message += f"\n**Total: {format_brl(total)}**"
    await update.message.reply_text(message, parse_mode="Markdown")


async def delete_expense_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Remove um gasto pelo ID."""
    supabase_client = context.bot_data["supabase_client"]

    if not context.args:
        await update.message.reply_text("Uso: `/remover_gasto [id]`\nO ID aparece em `/gastos`.")
        return

    expense_id = context.args[0].strip()
    if db.delete_expense(supabase_client, expense_id):
        await update.message.reply_text("🗑️ Gasto removido com sucesso!")
    else:
        await update.message.reply_text("❌ Erro ao remover gasto. Tente novamente.")
