# quimica/llm.py
import logging
from typing import Any, Dict, Optional, Tuple

from openai import OpenAI

from quimica.config import Settings, build_client
from quimica.outcomes import Outcome
from quimica.parsing import MalformedResponseError, parse_content, parse_json_content
from quimica.prompts import build_messages
from quimica.schema import Prediction, ReactionResult

log = logging.getLogger(__name__)

# Sampling stays fully random (temperature=1, top_p=1), so the same formula
# can come back with different products on different calls.
GENERATION_PARAMS: Dict[str, Any] = {
    "temperature": 1,
    "max_tokens": 256,
    "top_p": 1,
    "frequency_penalty": 0,
    "presence_penalty": 0,
}

RESPONSE_FORMATS = {
    "text": {"type": "text"},
    "json": {"type": "json_object"},
}


USAGE_FIELDS = ("prompt_tokens", "completion_tokens", "total_tokens")


def _extract_usage(usage_obj) -> Optional[Dict[str, Optional[int]]]:
    if not usage_obj:
        return None
    return {name: getattr(usage_obj, name, None) for name in USAGE_FIELDS}


class ReactionPredictor:
    """Asks the completion service what ``formula`` reacts into.

    The client is passed in (or built once from settings) and reused by every
    request; tests hand in a fake with the same ``chat.completions.create``
    shape.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[OpenAI] = None):
        self.settings = settings or Settings.from_env()
        self.client = client if client is not None else build_client(self.settings)

    def call_llm_reaction_with_usage(self, formula: str) -> Tuple[Optional[str], Optional[Dict], Any]:
        """One chat completion call. Returns (content, usage, raw response)."""
        mode = self.settings.output_mode
        resp = self.client.chat.completions.create(
            model=self.settings.openai_model,
            messages=build_messages(formula, mode),
            response_format=RESPONSE_FORMATS[mode],
            **GENERATION_PARAMS,
        )
        content = resp.choices[0].message.content
        usage = _extract_usage(getattr(resp, "usage", None))
        return content, usage, resp

    def parse(self, content: Optional[str]):
        if self.settings.output_mode == "json":
            return parse_json_content(content)
        return parse_content(content, strict=self.settings.strict_parsing)

    def predict_reaction(self, formula: str) -> Prediction:
        if not formula:
            return Prediction(outcome=Outcome.NO_REACTION)

        try:
            content, usage, resp = self.call_llm_reaction_with_usage(formula)
            log.debug("LLM raw output for %r: %r", formula, content)
            if usage:
                log.info(
                    "tokens → prompt:%s completion:%s total:%s",
                    usage.get("prompt_tokens"),
                    usage.get("completion_tokens"),
                    usage.get("total_tokens"),
                )

            result = self.parse(content)
        except MalformedResponseError as e:
            log.warning("Unparseable model output for %r: %s %s", formula, e, e.errors)
            return Prediction(outcome=Outcome.UNAVAILABLE)
        except Exception:
            # rede, auth, rate limit, timeout ou payload sem choices
            log.exception("Reaction prediction failed for %r", formula)
            return Prediction(outcome=Outcome.UNAVAILABLE)

        if isinstance(result, ReactionResult):
            return Prediction(outcome=Outcome.REACTION, result=result, usage=usage)

        log.info("No message content: %r", content)
        log.debug("Response: %r", resp)
        return Prediction(outcome=Outcome.NO_REACTION, usage=usage)
