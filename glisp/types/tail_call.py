from glisp import SExpression
from glisp.types.environment import Environment


class TailCall:
    """Continuation handed back to the evaluator loop: evaluate `exp` in `env`
    instead of recursing."""

    __slots__ = ("exp", "env")

    def __init__(self, exp: SExpression, env: Environment):
        self.exp = exp
        self.env = env
