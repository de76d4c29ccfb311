import datetime
from decimal import Decimal, InvalidOperation

from telegram import Update
from telegram.ext import ContextTypes
from mtn.core import db
from mtn.utils.text_utils import format_amount, format_brl


def _parse_positive(raw: str) -> Decimal:
    value = Decimal(raw.replace(",", "."))
    if not value.is_finite() or value <= 0:
        raise InvalidOperation(raw)
    return value


async def list_investments_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Lista a carteira com o valor investido em cada ativo e o total."""
    supabase_client = context.bot_data["supabase_client"]
    ativos = db.get_investments(supabase_client, user_id=context.bot_data.get("owner_id"))

    if not ativos:
        await update.message.reply_text(
            "Nenhum investimento registrado ainda. Tente: `/adicionar_investimento PETR4 10 36,50`"
        )
        return

    message = "**Seus investimentos:**\n\n"
    total = 0.0
    for ativo in ativos:
        cotas = ativo.get("shares") or 0
        investido = float(cotas) * float(ativo.get("price") or 0)
        total += investido
        message += (
            f"• {ativo.get('ticker')} ({ativo.get('name')}): {format_amount(cotas)} x {format_brl(ativo.get('price'))} "
            f"= {format_brl(investido)} `{ativo.get('id')}`\n"
        )
    message += f"\n**Total investido: {format_brl(total)}**"
    await update.message.reply_text(message, parse_mode="Markdown")


async def add_investment_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Registra um ativo: /adicionar_investimento TICKER QUANTIDADE PRECO [nome]."""
    supabase_client = context.bot_data["supabase_client"]

    if not context.args or len(context.args) < 3:
        await update.message.reply_text(
            "Uso: `/adicionar_investimento [ticker] [quantidade] [preço] [nome]`\n"
            "Ex: `/adicionar_investimento PETR4 10 36,50 Petrobras`"
        )
        return

    ticker = context.args[0].strip().upper()
    try:
        shares = _parse_positive(context.args[1])
        price = _parse_positive(context.args[2])
    except InvalidOperation:
        await update.message.reply_text("Quantidade e preço precisam ser números maiores que zero, ex: `10` e `36,50`.")
        return

    name = " ".join(context.args[3:]).strip() or ticker
    ativo = db.add_investment(
        supabase_client,
        ticker=ticker,
        name=name,
        shares=shares,
        price=price,
        purchase_date=datetime.date.today(),
        user_id=context.bot_data.get("owner_id"),
    )
    if ativo:
        await update.message.reply_text(
            f"📈 Investimento adicionado! {ticker}: {format_amount(shares)} x {format_brl(price)} = {format_brl(shares * price)}"
        )
    else:
        await update.message.reply_text("❌ Erro ao adicionar investimento. Tente novamente.")


async def delete_investment_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Remove um investimento pelo ID."""
    supabase_client = context.bot_data["supabase_client"]

    if not context.args:
        await update.message.reply_text("Uso: `/remover_investimento [id]`\nO ID aparece em `/investimentos`.")
        return

    if db.delete_investment(supabase_client, context.args[0].strip()):
        await update.message.reply_text("🗑️ Investimento removido com sucesso!")
    else:
        await update.message.reply_text("❌ Erro ao remover investimento. Tente novamente.")
