from unittest.mock import Mock, patch

from cascade.simulation import LLMClient
from cascade.simulation.models import ChatTurn, Message


def create_mock_response(content: str = "<action>GUESS E</action>", model: str = "gpt-5-nano", usage: bool = True) -> Mock:
    """
    Create a mock response matching litellm's ModelResponse structure.

    Only the parts the client reads are realistic: ``choices[0].message``
    and ``usage`` with integer token counts.
    """
    return Mock(
        id='chatcmpl-test123',
        model=model,
        object='chat.completion',
        choices=[
            Mock(
                finish_reason='stop',
                index=0,
                message=Mock(content=content, role='assistant', tool_calls=None)
            )
        ],
        usage=Mock(completion_tokens=10, prompt_tokens=5, total_tokens=15) if usage else None,
    )


def played_client(turns: int, max_turns: int = 10) -> LLMClient:
    client = LLMClient(model="gpt-5-nano", max_turns=max_turns)
    client.start_game("rules")
    client.turns = [ChatTurn(prompt=f"turn {i}", reply=f"reply {i}") for i in range(turns)]
    return client


class TestLLMClientInitialization:
    """Test cases for LLM client initialization."""

    def test_defaults(self):
        """Initialize with just a model name."""
        client = LLMClient(model="gpt-5-nano")
        assert client.model == "gpt-5-nano"
        assert client.temperature == 1.0
        assert client.max_tokens is None
        assert client.max_turns == 10
        assert client.system_prompt is None
        assert client.turns == []

    def test_additional_params(self):
        """Unknown keyword arguments are kept for litellm."""
        client = LLMClient(model="gpt-5-nano", top_p=0.9, reasoning_effort="low")
        assert client.additional_params == {"top_p": 0.9, "reasoning_effort": "low"}

    def test_no_additional_params(self):
        assert LLMClient(model="gpt-5-nano").additional_params == {}


class TestBuildMessages:
    """Test cases for the messages sent with each turn."""

    def test_first_turn(self):
        """The first request is the rules and the opening board."""
        client = played_client(0)
        assert client.build_messages("## Turn 1") == [
            {"role": "system", "content": "rules"},
            {"role": "user", "content": "## Turn 1"},
        ]

    def test_turns_in_order(self):
        """Past turns go out as prompt/reply pairs, oldest first."""
        messages = played_client(2).build_messages("## Turn 3")
        assert [m["role"] for m in messages] == ["system", "user", "assistant", "user", "assistant", "user"]
        assert [m["content"] for m in messages[1:]] == ["turn 0", "reply 0", "turn 1", "reply 1", "## Turn 3"]

    def test_keeps_recent_turns(self):
        """Long games keep the rules and only the latest turns."""
        messages = played_client(5, max_turns=2).build_messages("## Turn 6")
        assert messages[0] == {"role": "system", "content": "rules"}
        assert [m["content"] for m in messages[1:]] == ["turn 3", "reply 3", "turn 4", "reply 4", "## Turn 6"]

    def test_zero_turns_sends_board_only(self):
        """With no history allowed each request is rules plus board."""
        assert len(played_client(3, max_turns=0).build_messages("now")) == 2

    def test_no_rules(self):
        """Without a game started there is no system message."""
        assert LLMClient(model="gpt-5-nano").build_messages("Hi") == [{"role": "user", "content": "Hi"}]

    def test_start_game_resets_turns(self):
        """A new game drops the previous game's turns and swaps the rules."""
        client = played_client(3)
        client.start_game("new rules")
        assert client.turns == []
        assert client.build_messages("## Turn 1")[0]["content"] == "new rules"

    def test_message_model_dump(self):
        """Message serializes to the chat dict format."""
        assert Message(role="user", content="Test").model_dump() == {"role": "user", "content": "Test"}


class TestRequestParams:
    """Test cases for the litellm keyword arguments."""

    def test_basic(self):
        """Model, messages and temperature are always sent; max_tokens only when set."""
        client = LLMClient(model="gpt-5-nano", temperature=0.2)
        params = client.request_params([{"role": "user", "content": "Hi"}])
        assert params["model"] == "gpt-5-nano"
        assert params["messages"] == [{"role": "user", "content": "Hi"}]
        assert params["temperature"] == 0.2
        assert "max_tokens" not in params

    def test_max_tokens(self):
        assert LLMClient(model="gpt-5-nano", max_tokens=150).request_params([])["max_tokens"] == 150

    def test_additional_params(self):
        """Extra init params are passed through."""
        assert LLMClient(model="gpt-5-nano", top_p=0.9).request_params([])["top_p"] == 0.9

    def test_reasoning_effort_allowed(self):
        """reasoning_effort is added to the allowed OpenAI params."""
        params = LLMClient(model="gpt-5-nano", reasoning_effort="high").request_params([])
        assert params["reasoning_effort"] == "high"
        assert params["allowed_openai_params"] == ["reasoning_effort"]

    def test_reasoning_effort_keeps_allowed_list(self):
        """An existing allowed list is extended, not replaced."""
        client = LLMClient(model="gpt-5-nano", reasoning_effort="low", allowed_openai_params=["seed"])
        assert client.request_params([])["allowed_openai_params"] == ["seed", "reasoning_effort"]
        assert client.additional_params["allowed_openai_params"] == ["seed"]


class TestAsk:
    """Test cases for ask()."""

    @patch('litellm.completion')
    def test_ask_records_turn(self, mock_completion):
        """ask() sends the board and stores the prompt with its reply."""
        mock_completion.return_value = create_mock_response(content="<action>SKIP</action>")
        client = played_client(0)

        text = client.ask("## Turn 5")

        assert text == "<action>SKIP</action>"
        assert client.turns == [ChatTurn(prompt="## Turn 5", reply="<action>SKIP</action>")]
        sent = mock_completion.call_args[1]["messages"]
        assert sent[-1] == {"role": "user", "content": "## Turn 5"}

    @patch('litellm.completion')
    def test_usage_accumulates(self, mock_completion):
        """Token counts add up across turns until consumed."""
        mock_completion.return_value = create_mock_response()
        client = LLMClient(model="gpt-5-nano")
        client.ask("one")
        client.ask("two")

        assert client.consume_usage() == {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30}
        assert client.consume_usage() == {}

    @patch('litellm.completion')
    def test_ask_without_usage(self, mock_completion):
        """Missing usage adds nothing."""
        mock_completion.return_value = create_mock_response(usage=False)
        client = LLMClient(model="gpt-5-nano")
        client.ask("Hi")
        assert client.consume_usage() == {}

    @patch('litellm.completion')
    def test_ask_empty_content(self, mock_completion):
        """A None reply body is recorded as an empty string."""
        mock_completion.return_value = create_mock_response(content=None)
        client = LLMClient(model="gpt-5-nano")
        assert client.ask("Hi") == ""
        assert client.turns[-1].reply == ""

    @patch('litellm.completion')
    def test_provider_error_recorded(self, mock_completion):
        """Provider errors return None, are recorded once and leave no turn behind."""
        mock_completion.side_effect = RuntimeError("rate limited")
        client = played_client(1)

        assert client.ask("## Turn 2") is None
        assert len(client.turns) == 1
        assert client.consume_errors() == ["LLM error: rate limited"]
        assert client.consume_errors() == []
        assert client.consume_usage() == {}
