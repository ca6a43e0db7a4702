# quimica/outcomes.py
from enum import Enum


class Outcome(str, Enum):
    REACTION = "reaction"
    NO_REACTION = "no_reaction"
    UNAVAILABLE = "unavailable"


# sentinel: o modelo respondeu que não há reação
NO_REACTION = Outcome.NO_REACTION

# literal que o modelo devolve quando não há reação
NULL_TOKEN = "null"
