# tests/test_prompts.py
"""
Unit tests for prompt construction in portraitgen/prompts.py.
"""

from portraitgen import prompts


class TestBuildPrompt:
    """Test suite for build_prompt."""

    def test_default_fragment_is_wrapped(self):
        """With no arguments the canned fragment is wrapped in prefix and suffix."""
        expected = (
            prompts.SAME_PERSON_PREFIX
            + prompts.DEFAULT_SAME_PERSON_PROMPT
            + prompts.SAME_PERSON_SUFFIX
        )
        assert prompts.build_prompt() == expected

    def test_custom_fragment_is_wrapped(self):
        result = prompts.build_prompt("give them a mohawk")
        assert result == (
            "Generate a photorealistic image of the same person from the reference photo, "
            "but give them a mohawk. It is essential to preserve their exact facial "
            "identity, ensuring they remain fully recognizable."
        )

    def test_full_prompt_is_used_verbatim(self):
        """A full prompt wins regardless of the fragment."""
        result = prompts.build_prompt("give them a mohawk", "Paint this as a watercolor")
        assert result == "Paint this as a watercolor"
        assert prompts.SAME_PERSON_PREFIX not in result

    def test_empty_full_prompt_means_not_provided(self):
        assert prompts.build_prompt("curly hair", "") == (
            prompts.SAME_PERSON_PREFIX + "curly hair" + prompts.SAME_PERSON_SUFFIX
        )

    def test_empty_fragment_is_not_replaced_by_default(self):
        """Only a missing fragment falls back to the default, an empty one is kept."""
        assert prompts.build_prompt("") == (
            prompts.SAME_PERSON_PREFIX + prompts.SAME_PERSON_SUFFIX
        )
