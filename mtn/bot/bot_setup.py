# mtn/bot/bot_setup.py
from telegram.ext import Application, MessageHandler, filters, CommandHandler
from mtn.bot.commands import ALL_COMMANDS
from mtn.bot.handlers import handle_message


def setup_and_run_bot(config: dict) -> Application:
    """
    Configura a aplicação do bot do Telegram (comandos e mensagens livres).
    Retorna o objeto Application configurado, pronto para ser usado por um servidor WSGI.
    """
    application = Application.builder().token(config["TELEGRAM_BOT_TOKEN"]).build()

    # Handlers e comandos leem o cliente Supabase e o dono dos registros do bot_data
    application.bot_data['supabase_client'] = config["SUPABASE_CLIENT"]
    application.bot_data['owner_id'] = config.get("OWNER_ID")

    for name, command in ALL_COMMANDS.items():
        application.add_handler(CommandHandler(name, command))

    # Toda mensagem de texto que não é comando vai para o interpretador
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    print("Bot Telegram configurado para Webhooks. Pronto para ser rodado pelo WSGI.")
    return application
