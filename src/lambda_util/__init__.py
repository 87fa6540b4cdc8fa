from typing import List

from . import consumer_currying as consumer_currying
from . import currying as currying
from . import function_currying as function_currying
from . import predicate_currying as predicate_currying
from ._version import VERSION as VERSION
from .error import LambdaUtilError as LambdaUtilError
from .error import NullSourceError as NullSourceError
from .kind import Kind as Kind
from .ter import TerConsumer as TerConsumer
from .ter import TerFunction as TerFunction
from .ter import TerPredicate as TerPredicate
from .ter import ter_consumer as ter_consumer
from .ter import ter_function as ter_function
from .ter import ter_predicate as ter_predicate

__all__: List[str] = [
    "VERSION",
    # Three-argument operations
    "TerConsumer",
    "TerFunction",
    "TerPredicate",
    "ter_consumer",
    "ter_function",
    "ter_predicate",
    # Currying
    "Kind",
    "consumer_currying",
    "function_currying",
    "predicate_currying",
    "currying",
    # Error types
    "LambdaUtilError",
    "NullSourceError",
]
