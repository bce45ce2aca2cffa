"""
Template-driven chat between agents.

Each step a few agents post a basic message; new messages are then
rewritten from a template whose category follows the poster's personality
and the recent conversation.
"""

import logging
import numpy as np
from dataclasses import replace
from typing import List, Optional

from ..agent import Agent
from ..network.graph_model import Network, Message, create_message
from .templates import MESSAGE_TEMPLATES, REACTIONS, BASIC_TEMPLATES

logger = logging.getLogger(__name__)

ENHANCE_PROBABILITY = 0.6
REACTION_PROBABILITY = 0.3
RECENT_WINDOW = 10


def _pick(items, rng: np.random.Generator):
    return items[int(rng.integers(len(items)))]


def speaker_name(message: Message) -> str:
    """Name prefix of a ``"<name>: <text>"`` message, or an empty string."""
    colon = message.content.find(":")
    return message.content[:colon].strip() if colon > 0 else ""


def find_last_message_from_sender(messages: List[Message], sender_id: int) -> Optional[Message]:
    for message in reversed(messages):
        if message.sender_id == sender_id:
            return message
    return None


def generate_basic_message(agent: Agent, topic: str, rng: Optional[np.random.Generator] = None) -> str:
    """
    Generate a simple template message.

    Args:
        agent: Posting agent
        topic: Current discussion topic
        rng: Random generator

    Returns:
        Message text prefixed with the agent's name
    """
    rng = rng if rng is not None else np.random.default_rng()
    return f"{agent.name}: {_pick(BASIC_TEMPLATES, rng).format(topic=topic)}"


def simulate_message_exchange(network: Network, rng: Optional[np.random.Generator] = None) -> Network:
    """
    Let a few randomly chosen agents post a basic message.

    Args:
        network: Current network state (left unchanged)
        rng: Random generator

    Returns:
        New network with the posted messages appended to the log
    """
    if not network.nodes:
        return network
    rng = rng if rng is not None else np.random.default_rng()

    speaking_count = min(3, max(1, int(len(network.nodes) * 0.3)))
    chosen = rng.permutation(len(network.nodes))[:speaking_count]

    new_messages = []
    for index in chosen:
        agent = network.nodes[int(index)]
        content = generate_basic_message(agent, network.current_topic, rng)
        new_messages.append(create_message(agent.id, content))
        logger.debug(f"Agent #{agent.id} says: {content}")

    return replace(network, message_log=network.message_log + new_messages)


def select_message_type(agent: Agent, recent_messages: List[Message],
                        rng: Optional[np.random.Generator] = None) -> str:
    """
    Choose a template category from the agent's traits and recent chat.

    Args:
        agent: Posting agent
        recent_messages: Most recent messages of the conversation
        rng: Random generator

    Returns:
        Key of MESSAGE_TEMPLATES
    """
    rng = rng if rng is not None else np.random.default_rng()
    traits = agent.traits
    recent_speakers = [m.sender_id for m in recent_messages[-3:]]

    if traits.openness > 0.7:
        return "JOKE" if rng.random() < 0.5 else "STORY"
    if traits.agreeableness < 0.3:
        return "DISAGREEMENT"
    if traits.agreeableness > 0.7 and recent_speakers:
        return "AGREEMENT"
    if traits.extraversion > 0.7:
        return "QUESTION" if rng.random() < 0.7 else "OPINION"
    if traits.neuroticism > 0.7:
        return "OFFTOPIC" if rng.random() < 0.3 else "OPINION"

    has_questions = any("?" in m.content for m in recent_messages)
    has_opinions = any("I think" in m.content or "opinion" in m.content for m in recent_messages)
    has_jokes = any("😂" in m.content or "🤣" in m.content for m in recent_messages)

    if has_questions and not has_opinions:
        return "OPINION"
    if has_opinions and not has_questions:
        return "QUESTION"
    if not has_jokes and rng.random() < 0.3:
        return "JOKE"
    if recent_speakers and rng.random() < 0.4:
        return "AGREEMENT" if rng.random() < 0.5 else "DISAGREEMENT"
    if rng.random() < 0.2:
        return "STORY"
    if rng.random() < 0.1:
        return "OFFTOPIC"
    return "OPINION"


def _last_speaker_name(network: Network, agent: Agent, recent_messages: List[Message]) -> str:
    others = [m.sender_id for m in recent_messages[-3:] if m.sender_id != agent.id]
    if not others:
        return ""
    speaker_id = others[0]
    previous = find_last_message_from_sender(network.message_log, speaker_id)
    name = speaker_name(previous) if previous else ""
    return name or f"Agent{speaker_id}"


def enhance_messages(network: Network, new_messages: List[Message],
                     rng: Optional[np.random.Generator] = None) -> Network:
    """
    Rewrite freshly posted messages with personality-driven templates.

    Args:
        network: Network whose log already contains ``new_messages``
        new_messages: Messages posted during the current step
        rng: Random generator

    Returns:
        New network with the rewritten messages in place
    """
    if not new_messages:
        return network
    rng = rng if rng is not None else np.random.default_rng()

    new_ids = {m.id for m in new_messages}
    history = [m for m in network.message_log if m.id not in new_ids]
    recent = history[-RECENT_WINDOW:]

    rewritten = {}
    for message in new_messages:
        if rng.random() >= ENHANCE_PROBABILITY:
            continue
        agent = network.get_agent(message.sender_id)
        if agent is None:
            continue

        message_type = select_message_type(agent, recent, rng)
        last_speaker = ""
        if message_type in ("AGREEMENT", "DISAGREEMENT"):
            last_speaker = _last_speaker_name(network, agent, recent)
            if not last_speaker:
                message_type = "OPINION"

        content = _pick(MESSAGE_TEMPLATES[message_type], rng).format(
            topic=network.current_topic, lastSpeaker=last_speaker)
        if rng.random() < REACTION_PROBABILITY:
            content = f"{content} {_pick(REACTIONS, rng)}"

        name = speaker_name(message) or agent.name
        rewritten[message.id] = replace(message, content=f"{name}: {content}", type=message_type)

    log = [rewritten.get(m.id, m) for m in network.message_log]
    return replace(network, message_log=log)
