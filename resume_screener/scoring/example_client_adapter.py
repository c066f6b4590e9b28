"""Example scoring client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseScoringClient and register the provider in ScoringClientFactory.
"""

import json
from typing import ClassVar

from resume_screener.scoring.client_base import BaseScoringClient


class ExampleClientAdapter(BaseScoringClient):
    """Example adapter that returns a fixed, contract-conforming verdict.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "score": 50,
        "goodPoints": "Example evaluation: no model was consulted.",
        "badPoints": "Example evaluation: configure a real provider for actual scoring.",
    }

    def generate(
        self,
        *,
        model: str,
        prompt: str,
        max_output_tokens: int,
        temperature: float,
    ) -> str:
        _ = model, prompt, max_output_tokens, temperature
        return json.dumps(self.DEFAULT_RESPONSE)
