"""Handle suggestions for the registration form.

Purely cosmetic: a suggestion is not reserved and says nothing about
availability.
"""

import random

ADJECTIVES = (
    "Swift", "Bold", "Bright", "Clever", "Daring", "Eager", "Fierce", "Gentle",
    "Happy", "Jolly", "Kind", "Lively", "Merry", "Noble", "Proud", "Quick",
    "Radiant", "Smart", "Tough", "Vibrant", "Wise", "Zesty", "Brave", "Calm",
    "Cool", "Epic", "Fresh", "Golden", "Heroic", "Lucky", "Magic", "Neon",
    "Ocean", "Peppy", "Royal", "Super", "Turbo", "Ultra", "Wild", "Zen",
)

NOUNS = (
    "Tiger", "Eagle", "Lion", "Wolf", "Bear", "Fox", "Hawk", "Falcon",
    "Phoenix", "Dragon", "Shark", "Panther", "Jaguar", "Leopard", "Cheetah",
    "Raven", "Crow", "Owl", "Sparrow", "Robin", "Cardinal", "Warrior",
    "Guardian", "Champion", "Hero", "Legend", "Master", "Ninja", "Samurai",
    "Knight", "Wizard", "Mage", "Sage", "Explorer", "Pioneer", "Voyager",
    "Seeker", "Hunter", "Ranger", "Scout", "Spy",
)


def suggest_handle(rng: random.Random | None = None) -> str:
    """Build an adjective + noun + number handle such as ``SwiftTiger42``.

    Args:
        rng: Optional random source (for deterministic tests)

    Returns:
        Suggested handle, at most 20 characters
    """
    rng = rng or random.Random()
    return f"{rng.choice(ADJECTIVES)}{rng.choice(NOUNS)}{rng.randint(1, 999)}"
