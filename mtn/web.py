# mtn/web.py
import sys
import traceback
from typing import Union

from flask import Flask, request, jsonify
from supabase import Client
from telegram import Update
from telegram.ext import Application

from mtn.config import MAX_MESSAGE_LENGTH
from mtn.core.interpreter import interpret

WEBHOOK_PATH_SUFFIX = "/webhook"
ASSISTANT_PATH = "/assistant"


def create_app(supabase_client: Client, ptb_application: Union[Application, None] = None,
               owner_id: Union[str, None] = None) -> Flask:
    """
    Cria a aplicação Flask com a rota do assistente (chat web) e,
    se houver bot configurado, a rota de webhook do Telegram.
    """
    flask_app = Flask(__name__)

    @flask_app.route(ASSISTANT_PATH, methods=['POST'])
    def assistant():
        if not request.is_json:
            print("ERROR: Assistant received non-JSON request.", file=sys.stderr)
            return jsonify({"error": "Request must be JSON"}), 400

        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        message = body.get("message")
        if not isinstance(message, str) or not message.strip():
            return jsonify({"error": "Field 'message' is required"}), 400
        if len(message) > MAX_MESSAGE_LENGTH:
            return jsonify({"error": f"Field 'message' must have at most {MAX_MESSAGE_LENGTH} characters"}), 400

        # O dono vem da configuração do servidor; o corpo da requisição não é autenticado
        reply = interpret(supabase_client, message.strip(), user_id=owner_id)
        return jsonify({"response": reply}), 200

    if ptb_application is not None:
        @flask_app.route(WEBHOOK_PATH_SUFFIX, methods=['POST'])
        async def telegram_webhook():
            if not request.is_json:
                print("ERROR: Webhook received non-JSON request.", file=sys.stderr)
                return jsonify({"status": "error", "message": "Request must be JSON"}), 400

            update_json = request.get_json()
            print(f"DEBUG: Webhook received update: {update_json.keys() if update_json else 'None'}")

            try:
                update = Update.de_json(update_json, ptb_application.bot)
                await ptb_application.process_update(update)
                return jsonify({"status": "ok"}), 200
            except Exception as e:
                print(f"ERROR: Failed to process Telegram update: {e}", file=sys.stderr)
                traceback.print_exc(file=sys.stderr)
                return jsonify({"status": "error", "message": "Failed to process update"}), 500

    return flask_app
