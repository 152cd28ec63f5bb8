"""Engine module - property definitions, configuration and verdicts."""

from .hypothesis_engine import CheckingEngine, HypothesisEngine
from .params import CheckParams, parse_params
from .props import Prop, Properties, forall, prop
from .result import CheckResult, Outcome

__all__ = [
    "CheckingEngine",
    "HypothesisEngine",
    "CheckParams",
    "parse_params",
    "Prop",
    "Properties",
    "forall",
    "prop",
    "CheckResult",
    "Outcome",
]
