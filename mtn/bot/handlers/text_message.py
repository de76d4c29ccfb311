from telegram import Update
from telegram.ext import ContextTypes

from mtn.core.interpreter import interpret


async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Passa cada mensagem de texto pelo interpretador e responde com o resultado."""
    supabase_client = context.bot_data['supabase_client']
    user_message = update.message.text
    chat_id = update.message.chat_id

    print(f"Mensagem recebida de {chat_id}: {user_message}")

    if not user_message or not user_message.strip():
        return

    reply = interpret(supabase_client, user_message.strip(), user_id=context.bot_data.get('owner_id'))
    await update.message.reply_text(reply)
