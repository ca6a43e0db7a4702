# quimica/parsing.py
import json
from typing import Any, Dict, List, Optional, Union

from quimica.outcomes import NO_REACTION, NULL_TOKEN, Outcome
from quimica.schema import FIELDS, ReactionResult, schema_errors


class MalformedResponseError(ValueError):
    """Model output that is neither a reaction nor the no-reaction token."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


def is_no_reaction(content: Optional[str]) -> bool:
    return not content or content == NULL_TOKEN


def parse_content(content: Optional[str], strict: bool = False) -> Union[ReactionResult, Outcome]:
    """
    Parse the four-line answer (formula / name / description / emoji).

    Lines are trimmed and mapped by position. In the default permissive mode
    lines past the fourth are dropped and missing ones leave the field None.
    With ``strict=True`` anything other than four non-empty lines raises
    MalformedResponseError.
    """
    if is_no_reaction(content):
        return NO_REACTION

    lines = [line.strip() for line in content.split("\n")]
    fields: Dict[str, str] = dict(zip(FIELDS, lines))

    if strict:
        errors = schema_errors(fields)
        # uma quebra de linha final não conta como linha
        n_lines = len(content.strip().split("\n"))
        if n_lines != len(FIELDS):
            errors.append(f"expected {len(FIELDS)} lines, got {n_lines}")
        if errors:
            raise MalformedResponseError("malformed reaction text", errors)

    return ReactionResult(**fields)


def parse_json_content(content: Optional[str]) -> Union[ReactionResult, Outcome]:
    """JSON-mode counterpart of parse_content; always validated."""
    if is_no_reaction(content):
        return NO_REACTION

    try:
        doc: Any = json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"invalid JSON: {e}") from e

    if doc is None or (isinstance(doc, dict) and "reaction" in doc and doc["reaction"] is None):
        return NO_REACTION

    # trim antes de validar, para que "  " conte como vazio
    if isinstance(doc, dict):
        doc = {k: v.strip() if isinstance(v, str) else v for k, v in doc.items()}

    errors = schema_errors(doc)
    if errors:
        raise MalformedResponseError("malformed reaction JSON", errors)

    return ReactionResult(**doc)
