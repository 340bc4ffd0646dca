# Core type aliases for Minipyth's data model.
# Runtime values use plain Python types:
#   - Integer -> int (arbitrary precision)
#   - List    -> tuple (immutable, heterogeneous)
#   - Error   -> minipyth.types.value.ErrorValue
# Structural equality and hashing therefore come for free, which the
# fixed-point cycle check and deduplicate rely on.

from typing import Any, Callable

# Runtime value alias
Value = Any

# Evaluator function type: handed to higher-order forms so they can run their arguments
EvaluatorFn = Callable[..., Value]
