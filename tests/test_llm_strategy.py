"""Test suite for the LLM player: reply parsing, prompts and fallbacks."""

from unittest.mock import patch

from cascade.engine import GameConfig
from cascade.simulation import LLMStrategy, parse_reply, simulate_game
from cascade.simulation.llm_strategy import agrees_with_board, fallback_word
from cascade.simulation.prompts import build_player_prompt, format_feedback, get_system_prompt

from conftest import guess_all, make_puzzle
from test_llm_client import create_mock_response


LETTER_TURNS = ["GUESS E", "GUESS R", "GUESS A", "GUESS S", "SKIP"]
WORDS_REPLY = """<game_plan>Fill the columns.</game_plan>
<words>
2: LEMON
3: amber
4: NORTH
5: TRAVEL
</words>"""


def replies(*texts):
    return [create_mock_response(content=t) for t in texts]


def action(text: str) -> str:
    return f"<game_plan>thinking</game_plan>\n<action>{text}</action>"


class TestParseReply:
    """Test cases for parse_reply."""

    def test_guess(self):
        """A GUESS action yields the letter and the plan."""
        parsed = parse_reply("<game_plan>Vowels first</game_plan>\n<action>GUESS e</action>")
        assert parsed.letter == "E"
        assert parsed.thinking == "Vowels first"
        assert not parsed.skip

    def test_bare_letter(self):
        """A bare letter is accepted."""
        assert parse_reply("<action> T </action>").letter == "T"

    def test_skip(self):
        parsed = parse_reply("<action>SKIP</action>")
        assert parsed.skip
        assert parsed.letter is None

    def test_missing_action(self):
        """Replies without an action parse to nothing."""
        parsed = parse_reply("I think E is a good letter.")
        assert parsed.letter is None
        assert not parsed.skip
        assert parsed.raw_response == "I think E is a good letter."

    def test_unparseable_action(self):
        """Multi-letter garbage inside the action is not a guess."""
        assert parse_reply("<action>GUESS THE VOWEL</action>").letter is None

    def test_words(self):
        """Word lines are 1-based in the reply and 0-based when parsed."""
        parsed = parse_reply(WORDS_REPLY)
        assert parsed.words == {1: "LEMON", 2: "AMBER", 3: "NORTH", 4: "TRAVEL"}

    def test_words_separators(self):
        """Dots and parentheses work as separators too."""
        parsed = parse_reply("<words>\n1. PEAR\n2) LEMON\nnot a line\n</words>")
        assert parsed.words == {0: "PEAR", 1: "LEMON"}


class TestHelpers:
    """Test cases for the word helpers and prompts."""

    def test_agrees_with_board(self, word_phase):
        """Guesses must fit the length and every revealed letter."""
        word = word_phase.words[1]  # L E _ _ _
        assert agrees_with_board(word, "LEMON")
        assert agrees_with_board(word, "LEAKS")
        assert not agrees_with_board(word, "LIMON")
        assert not agrees_with_board(word, "LEMONS")

    def test_fallback_word(self, word_phase):
        """The fallback keeps visible letters and fills the blanks."""
        guess = fallback_word(word_phase.words[1])
        assert guess[:2] == "LE"
        assert len(guess) == 5
        assert agrees_with_board(word_phase.words[1], guess)

    def test_system_prompt_uses_config(self):
        """The rules text follows the configured limits."""
        prompt = get_system_prompt(GameConfig(max_vowels=2))
        assert "at most 2 of them vowels" in prompt
        assert "<action>GUESS X|SKIP</action>" in prompt

    def test_player_prompt(self, puzzle):
        """The turn prompt carries the board, feedback and skip status."""
        played = guess_all(puzzle, ["E"])
        prompt = build_player_prompt(played, 2, last_hits=4)
        assert "## Turn 2" in prompt
        assert "E was a hit in 4 column(s)" in prompt
        assert "SKIP unlocks after 4 letters" in prompt
        assert "2. L E _ _ _ (5 letters, 3 blanks)" in prompt

    def test_feedback_error(self):
        assert format_feedback(action_error="bad move") == "Action failed: bad move"


class TestLLMGame:
    """Full games against a mocked model."""

    @patch('litellm.completion')
    def test_scripted_game(self, mock_completion):
        """A well-behaved model plays the game it describes."""
        mock_completion.side_effect = replies(*[action(t) for t in LETTER_TURNS], WORDS_REPLY)
        strategy = LLMStrategy.create(model="gpt-5-nano")

        result = simulate_game(strategy, seed=1, puzzle=make_puzzle())

        assert mock_completion.call_count == 6
        assert result.errors == []
        assert result.letters_guessed == 4
        assert result.words_correct == 5
        assert result.cascade_earned
        assert result.total_score == 65 + 250 + 330 + 270 + 330 + 360 + 500
        assert result.total_tokens == 6 * 15
        assert result.prompt_tokens == 6 * 5

    @patch('litellm.completion')
    def test_system_prompt_sent_first(self, mock_completion):
        """Every request starts with the rules."""
        mock_completion.side_effect = replies(*[action(t) for t in LETTER_TURNS], WORDS_REPLY)
        simulate_game(LLMStrategy.create(model="gpt-5-nano"), seed=1, puzzle=make_puzzle())

        for call in mock_completion.call_args_list:
            messages = call[1]["messages"]
            assert messages[0]["role"] == "system"
            assert messages[-1]["role"] == "user"

    @patch('litellm.completion')
    def test_garbage_replies_still_finish(self, mock_completion):
        """Unparseable replies fall back to frequency letters and fitted words."""
        mock_completion.return_value = create_mock_response(content="No idea, sorry.")
        result = simulate_game(LLMStrategy.create(model="gpt-5-nano"), seed=1, puzzle=make_puzzle())

        assert result.letters_guessed == 7
        assert any("No <action>" in e for e in result.errors)
        assert any("No guess given" in e for e in result.errors)

    @patch('litellm.completion')
    def test_illegal_letter_is_replaced(self, mock_completion):
        """A repeated letter is reported back and replaced."""
        mock_completion.side_effect = replies(
            action("GUESS E"), action("GUESS E"), action("GUESS A"), action("GUESS R"), action("SKIP"),
            WORDS_REPLY,
        )
        result = simulate_game(LLMStrategy.create(model="gpt-5-nano"), seed=1, puzzle=make_puzzle())

        assert any("already been guessed" in e for e in result.errors)
        assert result.letters_guessed == 4
        # The failed turn is described in the next prompt
        third_prompt = mock_completion.call_args_list[2][1]["messages"][-1]["content"]
        assert "Action failed" in third_prompt

    @patch('litellm.completion')
    def test_early_skip_is_refused(self, mock_completion):
        """SKIP before the minimum becomes a letter guess."""
        mock_completion.side_effect = replies(
            action("SKIP"), action("GUESS R"), action("GUESS A"), action("GUESS S"), action("SKIP"),
            WORDS_REPLY,
        )
        result = simulate_game(LLMStrategy.create(model="gpt-5-nano"), seed=1, puzzle=make_puzzle())
        assert any("SKIP needs at least 4 letters" in e for e in result.errors)
        assert result.letters_guessed == 4

    @patch('litellm.completion')
    def test_provider_errors_recorded(self, mock_completion):
        """API failures are recorded and the game still completes."""
        mock_completion.side_effect = RuntimeError("rate limited")
        result = simulate_game(LLMStrategy.create(model="gpt-5-nano"), seed=1, puzzle=make_puzzle())
        assert any("LLM error: rate limited" in e for e in result.errors)
        assert result.total_tokens is None

    @patch('litellm.completion')
    def test_history_reset_between_games(self, mock_completion):
        """Each game starts a fresh conversation."""
        mock_completion.return_value = create_mock_response(content="No idea, sorry.")
        strategy = LLMStrategy.create(model="gpt-5-nano")
        simulate_game(strategy, seed=1, puzzle=make_puzzle())
        first_calls = mock_completion.call_count
        simulate_game(strategy, seed=2, puzzle=make_puzzle())

        first_of_second_game = mock_completion.call_args_list[first_calls][1]["messages"]
        assert len(first_of_second_game) == 2

    @patch('litellm.completion')
    def test_failed_turn_not_resent(self, mock_completion):
        """A turn lost to a provider error is left out of the next request."""
        mock_completion.side_effect = [RuntimeError("timeout")] + replies(*["No idea, sorry."] * 20)
        result = simulate_game(LLMStrategy.create(model="gpt-5-nano"), seed=1, puzzle=make_puzzle())

        assert result.errors[0] == "LLM error: timeout"
        second_request = mock_completion.call_args_list[1][1]["messages"]
        assert [m["role"] for m in second_request] == ["system", "user"]
        assert "## Turn 2" in second_request[-1]["content"]
