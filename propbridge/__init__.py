"""propbridge - run Hypothesis property collections from a test-runner host."""

from .engine.props import Prop, Properties, forall, prop
from .framework import PropertyFramework

__version__ = "0.1.0"

__all__ = [
    "Prop",
    "Properties",
    "forall",
    "prop",
    "PropertyFramework",
    "__version__",
]
