"""
Template chat between agents: topics, templates and message generation.
"""

from .templates import DISCUSSION_TOPICS, MESSAGE_TEMPLATES, get_random_topic
from .generation import (
    generate_basic_message,
    simulate_message_exchange,
    select_message_type,
    enhance_messages
)

__all__ = [
    "DISCUSSION_TOPICS",
    "MESSAGE_TEMPLATES",
    "get_random_topic",
    "generate_basic_message",
    "simulate_message_exchange",
    "select_message_type",
    "enhance_messages"
]
