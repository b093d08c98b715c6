"""LiteLLMJudgeClient — JSON-mode judge completions through LiteLLM."""

import time

import litellm

from call_eval.config.domain.judge import JudgeConfig
from call_eval.judge.domain.observer import JudgeObserver
from call_eval.judge.infrastructure.errors import JudgeInvocationError


class LiteLLMJudgeClient:
    """JudgeClient implementation that delegates to an LLM via LiteLLM.

    One instance is constructed per judge role. The credential is injected at
    construction time and passed on every call, so no module-level client or
    environment lookup is involved. Retries, if any, are left to LiteLLM's
    HTTP layer; this class makes exactly one attempt.
    """

    def __init__(
        self,
        config: JudgeConfig,
        api_key: str,
        name: str,
        observer: JudgeObserver,
    ) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._api_key = api_key
        self._name = name
        self._observer = observer

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Invoke the judge once and return the raw message content.

        Raises:
            JudgeInvocationError: if the LLM call fails or the response body
                is empty.
        """
        self._observer.judge_call_started(judge=self._name, model=self._config.model)

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
                response_format={"type": "json_object"},
                api_key=self._api_key,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            self._observer.judge_call_failed(judge=self._name, reason=reason)
            raise JudgeInvocationError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        content: str | None = None
        if response.choices:
            content = response.choices[0].message.content
        if not content or not content.strip():
            reason = "judge returned an empty response"
            self._observer.judge_call_failed(judge=self._name, reason=reason)
            raise JudgeInvocationError(reason=reason)

        self._observer.judge_call_completed(
            judge=self._name, duration_ms=duration_ms, characters=len(content)
        )
        return content
