"""
Discussion topics and message templates used by the agents' chat.
"""

import numpy as np
from typing import Optional

MESSAGE_TEMPLATES = {
    "OPINION": [
        "I strongly believe that {topic} is important because it impacts how we live our daily lives.",
        "In my opinion, {topic} has changed significantly over the years. It used to be so different!",
        "I think {topic} is overrated. Here's why: it doesn't actually solve the core problems we face.",
        "My take on {topic} is quite different from most people. I see it more as an opportunity than a challenge.",
        "From my perspective, {topic} is actually beneficial when you consider the long-term implications.",
        "Hot take: {topic} isn't what most people think it is. The reality is more complex.",
        "Unpopular opinion maybe, but {topic} deserves more credit than it gets.",
        "After researching {topic} extensively, I've concluded that conventional wisdom about it is wrong.",
    ],
    "QUESTION": [
        "What do you all think about {topic}? I'm curious about different perspectives.",
        "Has anyone here had personal experience with {topic}? Would love to hear stories!",
        "I'm wondering, does {topic} really make a difference in practice, or is it just theoretical?",
        "Could someone explain why {topic} is so controversial these days? I'm trying to understand.",
        "What would happen if we all embraced {topic} completely? Better or worse world?",
        "Is {topic} worth investing time in? Or is it just a passing trend?",
        "How did you first learn about {topic}? Was it through school, work, or social media?",
        "Serious question: how does {topic} affect your daily decisions?",
    ],
    "AGREEMENT": [
        "I completely agree with what @{lastSpeaker} said about {topic}! You nailed it.",
        "That's exactly right @{lastSpeaker}, {topic} is definitely worth considering for the reasons you mentioned.",
        "Yes! @{lastSpeaker} makes a good point about {topic}. I've seen this firsthand too.",
        "@{lastSpeaker} - 100% this. {topic} deserves more attention for exactly those reasons.",
        "Couldn't have said it better myself, @{lastSpeaker}! Your take on {topic} is spot on.",
        "Totally with you @{lastSpeaker} - {topic} changed my perspective too when I realized that.",
    ],
    "DISAGREEMENT": [
        "I respectfully disagree with @{lastSpeaker}. {topic} isn't that simple from my experience.",
        "Actually @{lastSpeaker}, I see {topic} quite differently because of what happened in my industry.",
        "I'm not convinced that's true about {topic}, @{lastSpeaker}. Have you considered the other side?",
        "That's an interesting perspective @{lastSpeaker}, but I think {topic} is more nuanced than that.",
        "Hmm, @{lastSpeaker} I have to push back on that. {topic} has worked differently in my experience.",
        "With all due respect @{lastSpeaker}, the research on {topic} actually suggests otherwise.",
    ],
    "JOKE": [
        "Why did {topic} cross the road? Because it was running from all these hot takes! 😂",
        "They say {topic} is serious business, but I'm just here for the memes 🤣",
        "Plot twist: {topic} was the real social media influencer all along! 😆",
        "If {topic} was a person, it would definitely be that friend who never replies to group chats 📱",
        "{topic} is like pizza - even when it's bad, it's still pretty good! 🍕",
    ],
    "STORY": [
        "True story: last year I had a fascinating experience with {topic} that changed my view completely...",
        "This reminds me of when I first encountered {topic} in college. It was eye-opening because no one had prepared me for it.",
        "I once read a book about {topic} that completely changed my perspective. It argued that we've been thinking about it all wrong.",
        "Growing up, my family always emphasized {topic}. Now I understand why - it shaped so much of my worldview.",
        "So last weekend I was dealing with {topic} and let me tell you, it did NOT go as expected...",
    ],
    "OFFTOPIC": [
        "Slightly off-topic, but has anyone seen that new show everyone's talking about?",
        "Speaking of {topic}, did you all hear about that viral news story yesterday? My timeline was full of it.",
        "Random thought: {topic} makes me think about how much society has changed since we were kids.",
        "Not to change the subject from {topic}, but did anyone catch the game last night?",
        "I should be working right now instead of discussing {topic}, but this is way more interesting!",
    ],
}

REACTIONS = [
    "❤️", "👍", "👏", "🙌", "💯", "🔥", "😂", "🤔", "😮",
    "exactly!", "this.", "100%", "facts", "debatable", "interesting",
    "wait what?", "mind blown", "same", "lol", "nailed it",
    "fair point", "^^ this", "spot on", "brilliant", "👀", "✨", "🤝",
]

BASIC_TEMPLATES = [
    "What do you think about {topic}? Thoughts?",
    "I have an opinion on {topic}. Let's discuss.",
    "{topic} has been on my mind recently.",
    "Been hearing a lot about {topic} lately.",
    "Curious what you all think about {topic}.",
    "Let's discuss something interesting about {topic}.",
]

DISCUSSION_TOPICS = [
    "remote work flexibility",
    "social media influence on mental health",
    "sustainable living practices",
    "artificial intelligence in education",
    "work-life balance in modern society",
    "renewable energy adoption",
    "digital privacy rights",
    "universal basic income",
    "plant-based diets",
    "electric vehicle transition",
    "mindfulness and meditation",
    "online learning effectiveness",
    "cryptocurrency adoption",
    "space exploration funding",
    "mental health awareness",
    "gender equality in workplaces",
    "climate change action",
    "affordable healthcare access",
    "public transportation development",
    "digital minimalism lifestyle",
]


def get_random_topic(rng: Optional[np.random.Generator] = None) -> str:
    """Pick a discussion topic."""
    rng = rng if rng is not None else np.random.default_rng()
    return DISCUSSION_TOPICS[int(rng.integers(len(DISCUSSION_TOPICS)))]
