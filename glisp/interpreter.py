from __future__ import annotations

import logging
from typing import Iterable, Optional

from glisp import SExpression, LispValue
from glisp.builtin.core import register
from glisp.config import get_save_eval_default
from glisp.evaluation.evaluator import evaluate
from glisp.types.environment import Environment
from glisp.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Evaluates already-parsed Glisp expression trees against a global
    Environment that persists across calls.

    With `save_eval` on, list and map nodes of the evaluated trees record
    their results (see glisp.types.node.EvalMeta) for tools that inspect a
    program after running it.
    """

    def __init__(self, save_eval: Optional[bool] = None, env: Optional[Environment] = None):
        self.save_eval: bool = get_save_eval_default() if save_eval is None else save_eval
        if env is None:
            env = Environment(name="global")
            register(env)
        self.env: Environment = env
        logger.debug("Interpreter ready (save_eval=%s)", self.save_eval)

    def eval(self, exp: SExpression) -> LispValue:
        return evaluate(exp, self.env, self.save_eval)

    def eval_all(self, exps: Iterable[SExpression]) -> LispValue:
        """Evaluate each form in order and return the last value (Nil if none)."""
        result: LispValue = Nil
        for exp in exps:
            result = self.eval(exp)
        return result
