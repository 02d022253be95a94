"""Console loop for Guci.

Reads one line at a time, evaluates it fully, prints the rendering (or the
error message) and checks the quit flag before reading again.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable

from guci import config
from guci.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run_repl(
    interp: Interpreter,
    read: Callable[[str], str] = input,
    write: Callable[[str], object] = print,
    prompt: str | None = None,
) -> None:
    prompt = config.get_prompt() if prompt is None else prompt
    logger.info("repl started")
    while not interp.quit_requested:
        try:
            line = read(prompt)
        except EOFError:
            break
        if not line.strip():
            continue
        write(interp.show_result(line))
    logger.info("repl finished (quit requested: %s)", interp.quit_requested)


def main() -> int:
    logging.basicConfig(level=config.get_log_level(), stream=sys.stderr)
    try:
        run_repl(Interpreter())
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
