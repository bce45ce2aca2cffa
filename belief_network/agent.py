"""
Agent model and population generation for the belief propagation simulation.
"""

import numpy as np
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

GENDERS = ("male", "female", "non-binary")

AGENT_NAMES = {
    "male": [
        "Aarav", "Vihaan", "Arjun", "Rohan", "Kabir", "Ishaan", "Aditya",
        "Siddharth", "Karan", "Dev", "Rahul", "Nikhil", "Vikram", "Anil",
    ],
    "female": [
        "Ananya", "Diya", "Priya", "Meera", "Kavya", "Isha", "Riya",
        "Saanvi", "Neha", "Pooja", "Aditi", "Lakshmi", "Shreya", "Tara",
    ],
    "non-binary": [
        "Arya", "Kiran", "Noor", "Sasha", "Ravi", "Jaya", "Sky",
        "Shan", "Avi", "Rishi", "Indu", "Chandra",
    ],
}

THOUGHT_TEMPLATES = [
    "I wonder if {topic} really makes a difference in our daily lives.",
    "My experience with {topic} has been quite different from what others say.",
    "I think {topic} is more complex than people realize.",
    "The implications of {topic} go deeper than most discussions cover.",
    "I'm curious about the long-term effects of {topic}.",
]


@dataclass
class BigFiveTraits:
    """Big Five personality traits, each normalized to [0, 1]."""
    openness: float
    conscientiousness: float
    extraversion: float
    agreeableness: float
    neuroticism: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass
class Agent:
    """
    Represents an individual agent in the social network.

    ``belief`` is a continuous scalar; an agent counts as a believer when it
    exceeds 0.5. ``history`` holds one believer flag per simulation step,
    the initial state included.
    """
    id: int
    name: str
    gender: str
    age: int
    belief: float
    susceptibility: float
    traits: BigFiveTraits
    history: List[bool] = field(default_factory=list)
    trait_history: List[BigFiveTraits] = field(default_factory=list)
    thoughts: Optional[str] = None

    @property
    def believer(self) -> bool:
        return self.belief > 0.5

    def update_belief(self, believer: bool):
        """
        Set the agent's belief and record it in the history.

        Args:
            believer: New believer state
        """
        self.belief = 1.0 if believer else 0.0
        self.history.append(believer)

    def record_unchanged(self):
        """Record the current belief for a step in which it did not change."""
        self.history.append(self.believer)


def _default_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def generate_random_traits(rng: Optional[np.random.Generator] = None) -> BigFiveTraits:
    """
    Generate random Big Five personality traits.

    Args:
        rng: Random generator to draw from

    Returns:
        Traits with each value uniform in [0, 1)
    """
    rng = _default_rng(rng)
    values = rng.random(5)
    return BigFiveTraits(*(float(v) for v in values))


def calculate_susceptibility(base: float, traits: BigFiveTraits) -> float:
    """
    Combine a base susceptibility with a personality factor.

    Openness, neuroticism, agreeableness and extraversion raise the factor;
    conscientiousness lowers it.

    Args:
        base: Base susceptibility in [0, 1]
        traits: Agent's Big Five traits

    Returns:
        Susceptibility clamped to [0, 1]
    """
    personality_factor = (
        traits.openness * 0.3
        + traits.neuroticism * 0.2
        + (1 - traits.conscientiousness) * 0.2
        + traits.agreeableness * 0.2
        + traits.extraversion * 0.1
    )
    return float(np.clip(base + personality_factor * 0.3, 0.0, 1.0))


def generate_agent_name(gender: str, rng: Optional[np.random.Generator] = None) -> str:
    """Pick a name from the list for the given gender."""
    rng = _default_rng(rng)
    names = AGENT_NAMES[gender]
    return names[int(rng.integers(len(names)))]


def initialize_agents(count: int, initial_believer_percentage: float,
                      rng: Optional[np.random.Generator] = None) -> List[Agent]:
    """
    Create a population of agents and seed the initial believers.

    Args:
        count: Number of agents to create
        initial_believer_percentage: Percentage of agents (0-100) that start as believers
        rng: Random generator to draw from

    Returns:
        Agents with ids 0..count-1
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if not 0 <= initial_believer_percentage <= 100:
        raise ValueError(
            f"initial_believer_percentage must be in [0, 100], got {initial_believer_percentage}"
        )
    rng = _default_rng(rng)

    agents = []
    for i in range(count):
        gender = GENDERS[int(rng.integers(len(GENDERS)))]
        traits = generate_random_traits(rng)
        agents.append(Agent(
            id=i,
            name=generate_agent_name(gender, rng),
            gender=gender,
            age=int(rng.integers(18, 68)),
            belief=0.0,
            susceptibility=calculate_susceptibility(float(rng.random()), traits),
            traits=traits,
            trait_history=[BigFiveTraits(**traits.to_dict())],
        ))

    believer_count = int(np.floor(count * initial_believer_percentage / 100))
    for index in rng.permutation(count)[:believer_count]:
        agents[int(index)].belief = 1.0

    for agent in agents:
        agent.history = [agent.believer]

    return agents


def generate_thought(agent: Agent, topic: str, rng: Optional[np.random.Generator] = None) -> str:
    """Generate an inner thought for an agent about the current topic."""
    rng = _default_rng(rng)
    template = THOUGHT_TEMPLATES[int(rng.integers(len(THOUGHT_TEMPLATES)))]
    return template.format(topic=topic)
