"""Unit tests for handle suggestions."""

import random
import re

from jolt.domain.service import suggest_handle
from jolt.domain.service.handle_suggestion import ADJECTIVES, NOUNS
from jolt.domain.value import HANDLE_MAX_LENGTH, Handle


class TestSuggestHandle:
    """Tests for suggest_handle."""

    def test_shape(self):
        handle = suggest_handle(random.Random(7))

        assert re.fullmatch(r"[A-Z][a-z]+[A-Z][a-z]+\d{1,3}", handle)

    def test_seeded_rng_is_deterministic(self):
        assert suggest_handle(random.Random(42)) == suggest_handle(random.Random(42))

    def test_longest_combination_is_a_valid_handle(self):
        longest = max(ADJECTIVES, key=len) + max(NOUNS, key=len) + "999"

        assert len(longest) <= HANDLE_MAX_LENGTH
        assert Handle(longest).root == longest
