from telegram import Update
from telegram.ext import ContextTypes

GREETING = (
    "Olá! Eu sou o MTN, seu assistente financeiro pessoal. Posso ajudá-lo a adicionar gastos, "
    "metas de economia, investimentos e responder perguntas sobre suas finanças. Como posso ajudar?"
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia a mensagem de boas-vindas quando o comando /start é emitido."""
    await update.message.reply_text(GREETING)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia uma mensagem quando o comando /help é emitido."""
    await update.message.reply_text(
        "**Como usar:**\n"
        "Para registrar um gasto, use frases como:\n"
        "- `adicionar 50 reais em gastos médicos`\n"
        "- `adicionar 30 reais com comida`\n\n"
        "Para criar uma meta de economia:\n"
        "- `criar meta de economizar 1000 reais`\n\n"
        "Qualquer outra mensagem vai direto para o assistente, ex: `como estão minhas finanças?`\n\n"
        "**Comandos:**\n"
        "- `/start`: Mensagem de boas-vindas.\n"
        "- `/help`: Mostra esta mensagem.\n"
        "- `/gastos`: Lista seus gastos mais recentes.\n"
        "- `/remover_gasto [id]`: Remove um gasto.\n"
        "- `/metas`: Lista suas metas e o progresso de cada uma.\n"
        "- `/depositar_meta [id] [valor]`: Soma um valor ao progresso de uma meta.\n"
        "- `/remover_meta [id]`: Remove uma meta.\n"
        "- `/investimentos`: Lista sua carteira e o total investido.\n"
        "- `/adicionar_investimento [ticker] [quantidade] [preço] [nome]`: Registra um ativo.\n"
        "- `/remover_investimento [id]`: Remove um investimento.",
        parse_mode="Markdown",
    )
