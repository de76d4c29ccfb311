# mtn/config.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

# Configurações do Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

# Configurações do Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Dono padrão dos registros criados pelo assistente (user_id no Supabase)
OWNER_ID = os.getenv("MTN_OWNER_ID")

# Configurações do Gemini API
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

# Valores padrão do interpretador de comandos
FALLBACK_EXPENSE_AMOUNT = Decimal("100")
FALLBACK_EXPENSE_DESCRIPTION = "Despesa adicionada via assistente"
GOAL_DEADLINE_DAYS = 365
GOAL_CATEGORY = "Poupança"
ASSISTANT_CONTEXT_TAG = "financial_assistant"

# Mensagens maiores que isso não passam pelos padrões de comando (só palavras-chave)
MAX_COMMAND_LENGTH = 500
# Limite de tamanho de mensagem aceito pela rota /assistant
MAX_MESSAGE_LENGTH = 4000
