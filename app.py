# app.py
# Execução local do bot via polling (sem webhook/Gunicorn).
# Em produção use: gunicorn mtn.main:wsgi_app
from mtn.bot.bot_setup import setup_and_run_bot
from mtn.config import TELEGRAM_BOT_TOKEN, OWNER_ID
from mtn.core.db import get_supabase_client


def main():
    if not TELEGRAM_BOT_TOKEN:
        raise SystemExit("Defina TELEGRAM_BOT_TOKEN no arquivo .env para rodar o bot.")

    config = {
        "TELEGRAM_BOT_TOKEN": TELEGRAM_BOT_TOKEN,
        "SUPABASE_CLIENT": get_supabase_client(),
        "OWNER_ID": OWNER_ID,
    }
    application = setup_and_run_bot(config)
    print("Bot rodando em modo polling. Pressione Ctrl+C para parar.")
    application.run_polling()


if __name__ == '__main__':
    main()
