# mtn/core/ai.py
from typing import Union

# Importações para Gemini
import google.generativeai as genai
from google.generativeai.types import HarmCategory, HarmBlockThreshold

from mtn.config import GOOGLE_API_KEY, GEMINI_MODEL, ASSISTANT_CONTEXT_TAG

# Configura a API do Gemini com sua chave
genai.configure(api_key=GOOGLE_API_KEY)

safety_settings = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_NONE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_NONE,
}

EMPTY_COMPLETION_REPLY = "Desculpe, não consegui processar sua solicitação."

SYSTEM_PROMPT = """Você é MTN, um assistente financeiro pessoal especializado em ajudar usuários brasileiros com suas finanças. Suas principais funções incluem:

1. Ajudar com gastos e despesas
2. Criar e acompanhar metas financeiras
3. Gerenciar investimentos
4. Fornecer insights financeiros
5. Responder perguntas sobre finanças pessoais

Diretrizes:
- Seja amigável, profissional e útil
- Use português brasileiro
- Forneça respostas práticas e acionáveis
- Se não souber algo específico, seja honesto
- Mantenha foco em finanças pessoais
- Use emojis ocasionalmente para tornar as respostas mais amigáveis

Você pode executar comandos diretos quando o usuário pedir para:
- Adicionar gastos (ex: "adicionar 100 reais em gastos médicos")
- Criar metas (ex: "criar meta de economizar 1000 reais")
- Adicionar investimentos

Sempre confirme quando uma ação foi executada com sucesso."""


def build_prompt(message: str, context_tag: str = ASSISTANT_CONTEXT_TAG) -> str:
    """Monta o prompt enviado ao Gemini: persona, contexto e mensagem do usuário."""
    return f"{SYSTEM_PROMPT}\n\nContexto: {context_tag}\n\nUsuário: {message}\nMTN:"


def ask_assistant(message: str, context_tag: str = ASSISTANT_CONTEXT_TAG, model: str = GEMINI_MODEL) -> Union[str, None]:
    """
    Envia a mensagem do usuário ao Gemini e devolve o texto da resposta.
    Retorna None se o serviço falhar ou estiver indisponível (sem novas tentativas).
    """
    try:
        model_instance = genai.GenerativeModel(
            model_name=model,
            safety_settings=safety_settings,
            generation_config={"max_output_tokens": 500, "temperature": 0.7},
        )
        response = model_instance.generate_content(build_prompt(message, context_tag))

        # O Gemini pode retornar uma resposta vazia ou bloqueada
        if not response.parts:
            print(f"DEBUG Gemini: Resposta vazia ou bloqueada. Raw: {response}")
            return EMPTY_COMPLETION_REPLY

        return response.text.strip() or EMPTY_COMPLETION_REPLY
    except Exception as e:
        print(f"Erro ao conectar com Gemini: {e}")
        return None
