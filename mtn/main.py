import sys
import asyncio
import traceback

from mtn.bot.bot_setup import setup_and_run_bot
from mtn.config import TELEGRAM_BOT_TOKEN, OWNER_ID
from mtn.core.db import get_supabase_client
from mtn.web import create_app

print("DEBUG: Iniciando mtn/main.py (Execução Global)")

# --- Setup da Aplicação no Escopo Global (executado uma vez quando o Gunicorn carrega o módulo) ---
try:
    supabase_client = get_supabase_client()
    print("DEBUG: Cliente Supabase inicializado.")

    ptb_application = None
    if TELEGRAM_BOT_TOKEN:
        config = {
            "TELEGRAM_BOT_TOKEN": TELEGRAM_BOT_TOKEN,
            "SUPABASE_CLIENT": supabase_client,
            "OWNER_ID": OWNER_ID,
        }
        ptb_application = setup_and_run_bot(config)
        try:
            asyncio.run(ptb_application.initialize())
            print("DEBUG: python-telegram-bot Application inicializada com sucesso!")
        except RuntimeError as e:
            if "cannot run an event loop while another loop is running" in str(e):
                print("DEBUG: Event loop já em execução, pulando asyncio.run(initialize()).")
            else:
                raise
    else:
        print("DEBUG: TELEGRAM_BOT_TOKEN ausente; apenas a rota /assistant será servida.")

    wsgi_app = create_app(supabase_client, ptb_application, owner_id=OWNER_ID)
    print("DEBUG: Variável wsgi_app definida como a aplicação Flask. Aplicação WSGI pronta.")

except Exception as e:
    print(f"ERROR: Erro crítico durante a inicialização em mtn/main.py: {e}", file=sys.stderr)
    traceback.print_exc(file=sys.stderr)
    raise
