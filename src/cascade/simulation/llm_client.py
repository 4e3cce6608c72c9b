"""
Conversation with the model playing one game.

The rules go out once per game as the system prompt. Every turn after that
is a board prompt and the model's reply; a request carries the rules, the
most recent turns and the new board.
"""

import logging
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import ChatTurn, Message


logger = logging.getLogger(__name__)

USAGE_KEYS = ("prompt_tokens", "completion_tokens", "total_tokens")


class LLMClient(BaseModel):
    """
    Client for one model seat, via LiteLLM.

    Keeps the turns of the current game, sums token usage and records
    provider failures instead of raising them, so a flaky API never aborts
    a simulation run.

    Attributes:
        model: LiteLLM model name
        max_turns: Past turns resent with each request
        turns: Completed turns of the current game, oldest first
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    # A letter phase is at most 7 turns, so the default keeps a whole game
    max_turns: int = 10
    system_prompt: Optional[str] = None
    turns: List[ChatTurn] = Field(default_factory=list)
    usage: Dict[str, int] = Field(default_factory=dict)
    errors: List[str] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Extra keyword arguments given at construction, passed on to litellm."""
        return self.__pydantic_extra__ or {}

    def start_game(self, system_prompt: str) -> None:
        """Forget the previous game and set the rules for the next one."""
        self.system_prompt = system_prompt
        self.turns = []

    def build_messages(self, prompt: str) -> List[Dict[str, str]]:
        """
        Chat messages for a request: rules, the last ``max_turns`` turns, then ``prompt``.
        """
        messages: List[Message] = []
        if self.system_prompt:
            messages.append(Message(role="system", content=self.system_prompt))
        recent = self.turns[-self.max_turns:] if self.max_turns > 0 else []
        for turn in recent:
            messages.append(Message(role="user", content=turn.prompt))
            messages.append(Message(role="assistant", content=turn.reply))
        messages.append(Message(role="user", content=prompt))
        return [m.model_dump() for m in messages]

    def request_params(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        """Keyword arguments for ``litellm.completion``."""
        params = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            **self.additional_params,
        }
        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        # If reasoning_effort is specified (OpenAI compatibility), allow it through
        if "reasoning_effort" in params:
            allowed = list(params.get("allowed_openai_params") or [])
            if "reasoning_effort" not in allowed:
                allowed.append("reasoning_effort")
            params["allowed_openai_params"] = allowed
        return params

    def ask(self, prompt: str) -> Optional[str]:
        """
        Send one turn's prompt and record the reply.

        Returns:
            The reply text, or None when the provider call failed. A failed
            turn is logged, added to ``errors`` and left out of the history.
        """
        turn = len(self.turns) + 1
        try:
            response = litellm.completion(**self.request_params(self.build_messages(prompt)))
        except Exception as e:
            logger.warning("LLM call failed on turn %d (%s): %s", turn, self.model, e)
            self.errors.append(f"LLM error: {e}")
            return None

        text = response.choices[0].message.content or ""
        self.turns.append(ChatTurn(prompt=prompt, reply=text))
        self._add_usage(getattr(response, "usage", None))
        logger.debug("Turn %d reply from %s: %d chars", turn, self.model, len(text))
        return text

    def _add_usage(self, usage: Any) -> None:
        if not usage:
            return
        for key in USAGE_KEYS:
            value = getattr(usage, key, None)
            if isinstance(value, int):
                self.usage[key] = self.usage.get(key, 0) + value

    def consume_usage(self) -> Dict[str, int]:
        """Token usage summed since the last call, then reset."""
        usage, self.usage = self.usage, {}
        return usage

    def consume_errors(self) -> List[str]:
        """Provider failures since the last call, then reset."""
        errors, self.errors = self.errors, []
        return errors
