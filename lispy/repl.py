"""Interactive read-eval-print loop.

Each input line is evaluated as one S-expression in a single long-lived
Interpreter, so definitions persist between lines. `exit` (or end of input)
leaves the loop.
"""

from __future__ import annotations

import logging
import sys

from lispy import __version__
from lispy.config import get_log_level, get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.types.value import to_string


def main() -> int:
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    interp = Interpreter()
    prompt = get_prompt()

    print(f"Lispy Version {__version__}")
    print("Press ctrl+c or type exit to exit\n")

    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except LispySyntaxError as exc:
            print(f"Syntax error: {exc}")
            continue
        print(to_string(result))


if __name__ == "__main__":
    sys.exit(main())
