"""Availability check — is the evaluation capability configured at all?"""

import os
from collections.abc import Mapping

CREDENTIAL_ENV_VAR = "OPENAI_API_KEY"


def is_call_evaluation_available(environ: Mapping[str, str] | None = None) -> bool:
    """Return True iff the judge/transcription credential is set and non-blank.

    Reads the environment only; no network call is made.
    """
    env = os.environ if environ is None else environ
    return bool(env.get(CREDENTIAL_ENV_VAR, "").strip())


def read_credential(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the configured credential, or None when evaluation is unavailable."""
    env = os.environ if environ is None else environ
    if not is_call_evaluation_available(env):
        return None
    return env[CREDENTIAL_ENV_VAR].strip()
