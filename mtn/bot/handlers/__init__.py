from .text_message import handle_message
