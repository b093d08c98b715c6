"""Error types raised while wiring the evaluation pipeline."""

from call_eval.core.errors import CallEvalError


class CredentialMissingError(CallEvalError):
    """Raised when the pipeline is built without a judge credential."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(
            f"Failed to build call evaluator: {env_var} is not set; "
            "call evaluation is unavailable"
        )
