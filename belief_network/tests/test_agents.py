"""Tests for agent generation and belief propagation."""

import numpy as np
import pytest

from belief_network.agent import (
    AGENT_NAMES,
    GENDERS,
    Agent,
    BigFiveTraits,
    calculate_susceptibility,
    generate_random_traits,
    generate_thought,
    initialize_agents,
)
from belief_network.core.propagation import run_belief_propagation_step, update_believers_majority
from belief_network.network.graph_model import Link, Network


def make_agent(agent_id, belief=0.0, susceptibility=0.0):
    return Agent(
        id=agent_id,
        name=f"Agent{agent_id}",
        gender="female",
        age=40,
        belief=belief,
        susceptibility=susceptibility,
        traits=BigFiveTraits(0.5, 0.5, 0.5, 0.5, 0.5),
        history=[belief > 0.5],
    )


class TestInitializeAgents:
    """Tests for population generation."""

    @pytest.fixture
    def agents(self):
        return initialize_agents(40, 25, np.random.default_rng(11))

    def test_ids_are_sequential(self, agents):
        assert [a.id for a in agents] == list(range(40))

    def test_believer_count(self, agents):
        assert sum(a.believer for a in agents) == 10

    def test_beliefs_are_binary(self, agents):
        assert {a.belief for a in agents} <= {0.0, 1.0}

    def test_history_holds_initial_state(self, agents):
        for agent in agents:
            assert agent.history == [agent.believer]
            assert len(agent.trait_history) == 1
            assert agent.trait_history[0] == agent.traits

    def test_attributes_in_range(self, agents):
        for agent in agents:
            assert agent.gender in GENDERS
            assert agent.name in AGENT_NAMES[agent.gender]
            assert 18 <= agent.age <= 67
            assert 0.0 <= agent.susceptibility <= 1.0
            assert all(0.0 <= v <= 1.0 for v in agent.traits.to_dict().values())
            assert agent.thoughts is None

    def test_believer_count_rounds_down(self):
        agents = initialize_agents(7, 50, np.random.default_rng(0))
        assert sum(a.believer for a in agents) == 3

    def test_percentage_bounds(self):
        rng = np.random.default_rng(0)
        assert not any(a.believer for a in initialize_agents(10, 0, rng))
        assert all(a.believer for a in initialize_agents(10, 100, rng))

    def test_empty_population(self):
        assert initialize_agents(0, 50) == []

    @pytest.mark.parametrize("count,percentage", [(-1, 10), (10, -5), (10, 101)])
    def test_invalid_arguments(self, count, percentage):
        with pytest.raises(ValueError):
            initialize_agents(count, percentage)

    def test_seeded_population_is_reproducible(self):
        first = initialize_agents(15, 40, np.random.default_rng(99))
        second = initialize_agents(15, 40, np.random.default_rng(99))
        assert first == second


class TestPersonality:
    """Tests for traits and susceptibility."""

    def test_random_traits_in_unit_interval(self):
        traits = generate_random_traits(np.random.default_rng(1))
        assert all(0.0 <= v < 1.0 for v in traits.to_dict().values())

    def test_balanced_traits(self):
        traits = BigFiveTraits(0.5, 0.5, 0.5, 0.5, 0.5)
        assert calculate_susceptibility(0.5, traits) == pytest.approx(0.65)

    def test_conscientiousness_lowers_factor(self):
        careful = BigFiveTraits(openness=0.0, conscientiousness=1.0, extraversion=0.0,
                                agreeableness=0.0, neuroticism=0.0)
        assert calculate_susceptibility(0.0, careful) == pytest.approx(0.0)

    def test_susceptibility_is_clamped(self):
        open_minded = BigFiveTraits(openness=1.0, conscientiousness=0.0, extraversion=1.0,
                                    agreeableness=1.0, neuroticism=1.0)
        assert calculate_susceptibility(1.0, open_minded) == 1.0

    def test_thought_mentions_topic(self):
        agent = make_agent(0)
        thought = generate_thought(agent, "urban gardening", np.random.default_rng(0))
        assert "urban gardening" in thought


class TestBeliefPropagation:
    """Tests for the majority-rule update."""

    @pytest.fixture
    def star(self):
        # Center 0 disbelieves, leaves 1-4 believe, agent 5 is isolated
        agents = [make_agent(0, belief=0.0)]
        agents += [make_agent(i, belief=1.0) for i in range(1, 5)]
        agents.append(make_agent(5, belief=1.0))
        links = [Link(0, i) for i in range(1, 5)]
        return Network(nodes=agents, links=links, current_topic="tea")

    def test_star_network_flips(self, star):
        result = run_belief_propagation_step(star)
        beliefs = [a.belief for a in result.nodes]

        assert beliefs[0] == 1.0
        assert beliefs[1:5] == [0.0, 0.0, 0.0, 0.0]

    def test_isolated_agent_keeps_state(self, star):
        result = run_belief_propagation_step(star)
        isolated = result.get_agent(5)

        assert isolated.belief == 1.0
        assert isolated.history == [True, True]

    def test_history_grows_by_one(self, star):
        result = run_belief_propagation_step(star)
        for agent in result.nodes:
            assert len(agent.history) == 2
            assert agent.history[-1] == agent.believer

    def test_input_network_unchanged(self, star):
        result = run_belief_propagation_step(star)

        assert result is not star
        assert star.nodes[0].belief == 0.0
        assert [len(a.history) for a in star.nodes] == [1] * 6
        assert result.links == star.links
        assert result.current_topic == "tea"

    def test_precomputed_adjacency(self, star):
        adjacency = star.adjacency_matrix()
        with_matrix = run_belief_propagation_step(star, adjacency)
        without_matrix = run_belief_propagation_step(star)
        assert [a.belief for a in with_matrix.nodes] == [a.belief for a in without_matrix.nodes]

    def test_susceptibility_lowers_threshold(self):
        adjacency = np.array([[0, 1, 1], [1, 0, 0], [1, 0, 0]])
        believers = np.array([False, True, False])

        stubborn = update_believers_majority(believers, adjacency, np.zeros(3))
        gullible = update_believers_majority(believers, adjacency, np.ones(3))

        # Agent 0 sees exactly half of its neighbors believing
        assert not stubborn[0]
        assert gullible[0]

    def test_empty_network(self):
        result = run_belief_propagation_step(Network(nodes=[], links=[]))
        assert result.nodes == []
