"""Tests for the template chat."""

import numpy as np
import pytest

from belief_network.agent import Agent, BigFiveTraits
from belief_network.messaging import (
    DISCUSSION_TOPICS,
    MESSAGE_TEMPLATES,
    enhance_messages,
    generate_basic_message,
    get_random_topic,
    select_message_type,
    simulate_message_exchange,
)
from belief_network.network.graph_model import Network, create_message


def make_agent(agent_id, name=None, **traits):
    values = dict(openness=0.5, conscientiousness=0.5, extraversion=0.5,
                  agreeableness=0.5, neuroticism=0.5)
    values.update(traits)
    return Agent(
        id=agent_id,
        name=name or f"Agent{agent_id}",
        gender="male",
        age=25,
        belief=0.0,
        susceptibility=0.5,
        traits=BigFiveTraits(**values),
        history=[False],
    )


class TestMessageExchange:
    """Tests for basic message posting."""

    @pytest.fixture
    def network(self):
        agents = [make_agent(i) for i in range(10)]
        return Network(nodes=agents, links=[], current_topic="electric cars")

    def test_three_speakers_in_large_network(self, network):
        result = simulate_message_exchange(network, np.random.default_rng(0))

        assert len(result.message_log) == 3
        assert len({m.sender_id for m in result.message_log}) == 3

    def test_single_speaker_in_small_network(self):
        network = Network(nodes=[make_agent(0), make_agent(1)], links=[], current_topic="tea")
        result = simulate_message_exchange(network, np.random.default_rng(0))
        assert len(result.message_log) == 1

    def test_messages_are_prefixed_with_speaker(self, network):
        result = simulate_message_exchange(network, np.random.default_rng(1))
        for message in result.message_log:
            sender = result.get_agent(message.sender_id)
            assert message.content.startswith(f"{sender.name}: ")
            assert "electric cars" in message.content

    def test_input_log_unchanged(self, network):
        result = simulate_message_exchange(network, np.random.default_rng(2))

        assert network.message_log == []
        assert result.nodes is network.nodes

    def test_log_accumulates(self, network):
        rng = np.random.default_rng(3)
        result = simulate_message_exchange(network, rng)
        result = simulate_message_exchange(result, rng)
        assert len(result.message_log) == 6

    def test_empty_network(self):
        network = Network(nodes=[], links=[])
        assert simulate_message_exchange(network) is network

    def test_basic_message(self):
        agent = make_agent(0, name="Priya")
        content = generate_basic_message(agent, "space travel", np.random.default_rng(0))
        assert content.startswith("Priya: ")


class TestMessageType:
    """Tests for personality-driven template selection."""

    def test_open_agents_joke_or_tell_stories(self):
        agent = make_agent(0, openness=0.9)
        rng = np.random.default_rng(0)
        for _ in range(20):
            assert select_message_type(agent, [], rng) in ("JOKE", "STORY")

    def test_disagreeable_agents_disagree(self):
        agent = make_agent(0, agreeableness=0.1)
        assert select_message_type(agent, [], np.random.default_rng(0)) == "DISAGREEMENT"

    def test_agreeable_agents_agree_with_recent_speakers(self):
        agent = make_agent(0, agreeableness=0.9)
        recent = [create_message(1, "Bob: hello")]
        assert select_message_type(agent, recent, np.random.default_rng(0)) == "AGREEMENT"

    def test_extraverts_ask_or_opine(self):
        agent = make_agent(0, extraversion=0.9)
        rng = np.random.default_rng(0)
        for _ in range(20):
            assert select_message_type(agent, [], rng) in ("QUESTION", "OPINION")

    def test_result_is_a_template_category(self):
        agent = make_agent(0)
        rng = np.random.default_rng(5)
        for _ in range(50):
            assert select_message_type(agent, [], rng) in MESSAGE_TEMPLATES


class TestEnhanceMessages:
    """Tests for template rewriting of new messages."""

    @pytest.fixture
    def network(self):
        agents = [make_agent(0, name="Bob"), make_agent(1, name="Meera", agreeableness=0.9)]
        earlier = create_message(0, "Bob: I like board games.")
        latest = create_message(1, "Meera: Been hearing a lot about board games lately.")
        return Network(nodes=agents, links=[], message_log=[earlier, latest], current_topic="board games")

    def test_message_count_preserved(self, network):
        new_messages = network.message_log[-1:]
        result = enhance_messages(network, new_messages, np.random.default_rng(0))

        assert len(result.message_log) == 2
        assert [m.id for m in result.message_log] == [m.id for m in network.message_log]

    def test_older_messages_untouched(self, network):
        result = enhance_messages(network, network.message_log[-1:], np.random.default_rng(0))
        assert result.message_log[0] == network.message_log[0]

    def test_agreement_addresses_previous_speaker(self, network):
        enhanced = 0
        for seed in range(15):
            result = enhance_messages(network, network.message_log[-1:], np.random.default_rng(seed))
            message = result.message_log[-1]
            if message.type is None:
                assert message == network.message_log[-1]
                continue
            enhanced += 1
            assert message.type == "AGREEMENT"
            assert message.content.startswith("Meera: ")
            assert "@Bob" in message.content
            assert message.sender_id == 1

        assert enhanced > 0

    def test_no_new_messages(self, network):
        assert enhance_messages(network, []) is network

    def test_no_previous_speaker_falls_back_to_opinion(self):
        agent = make_agent(0, name="Kiran", agreeableness=0.1)
        message = create_message(0, "Kiran: Curious what you all think about tea.")
        network = Network(nodes=[agent], links=[], message_log=[message], current_topic="tea")

        for seed in range(15):
            result = enhance_messages(network, [message], np.random.default_rng(seed))
            assert result.message_log[-1].type in (None, "OPINION")
            assert "@" not in result.message_log[-1].content


class TestTopics:
    """Tests for topic selection."""

    def test_random_topic(self):
        assert get_random_topic(np.random.default_rng(0)) in DISCUSSION_TOPICS
