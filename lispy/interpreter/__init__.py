from __future__ import annotations

import logging
from typing import Literal

from lispy.builtin.env_builtin import make_root_environment
from lispy.config import get_prelude_path
from lispy.evaluation.evaluator import evaluate
from lispy.reader.read import read_str
from lispy.types.environment import Environment
from lispy.types.value import Value

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Lispy code.
    Maintains one root Environment across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = make_root_environment()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude()
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self) -> None:
        path = get_prelude_path()
        if not path.is_file():
            # Be permissive: no prelude found -> proceed
            logger.debug("No prelude at %s", path)
            return
        logger.debug("Loading prelude from %s", path)
        self.eval_prelude(path.read_text(encoding='utf-8'))

    def eval_prelude(self, code: str) -> list[Value]:
        """Evaluate each top-level expression of `code` on its own."""
        return [evaluate(expr, self.env) for expr in read_str(code)]

    def eval(self, code: str) -> Value:
        """Evaluate one line of input.

        The whole line is read as a single S-expression, so `+ 1 2` and
        `(+ 1 2)` give the same result.
        """
        expr = read_str(code)
        logger.debug("Evaluating %s", expr)
        return evaluate(expr, self.env)
