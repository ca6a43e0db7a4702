# quimica/schema.py
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator
from pydantic import BaseModel

from quimica.outcomes import Outcome

FIELDS = ("formula", "name", "description", "emoji")


class ReactionResult(BaseModel):
    # campos faltando ficam None e somem do JSON de resposta
    formula: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    emoji: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


class MessageResponse(BaseModel):
    message: str


class Prediction(BaseModel):
    outcome: Outcome
    result: Optional[ReactionResult] = None
    usage: Optional[Dict[str, Optional[int]]] = None


# The description limit (150 chars) is only asked of the model, not checked here.
REACTION_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": list(FIELDS),
    "properties": {
        "formula": {"type": "string", "minLength": 1},
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string", "minLength": 1},
        "emoji": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}

REACTION_VALIDATOR = Draft7Validator(REACTION_SCHEMA)


def schema_errors(doc: Any) -> List[str]:
    return [f"{e.message} at {list(e.absolute_path)}" for e in REACTION_VALIDATOR.iter_errors(doc)]
