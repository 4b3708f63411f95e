"""Chat feature module"""

from gilded_desk.features.chat.service import CHAT_RESPONSES, pick_response

__all__ = ["CHAT_RESPONSES", "pick_response"]
