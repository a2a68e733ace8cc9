"""Interactive read-eval-print loop for Quill.

One line is read, evaluated to completion and printed before the next is
read. Entered lines are appended to a readline history file, which doubles as
the session transcript.
"""

from __future__ import annotations

import logging
import readline
from pathlib import Path
from typing import Callable, Optional

from quill import config
from quill.interpreter import Interpreter

logger = logging.getLogger(__name__)


class REPL:
    def __init__(
        self,
        interpreter: Interpreter,
        history_file: Optional[Path] = None,
        prompt: str = ">> ",
        history_length: int = 1000,
    ):
        self.interpreter = interpreter
        self.history_file = history_file
        self.prompt = prompt
        self.history_length = history_length

    def complete(self, text: str, state: int) -> Optional[str]:
        m = [k for k in self.interpreter.scope.names() if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def start(self) -> None:
        readline.set_history_length(self.history_length)
        readline.set_completer(self.complete)
        readline.set_completer_delims(" ()'")
        readline.parse_and_bind("tab: complete")

        if self.history_file is None:
            return
        try:
            readline.read_history_file(self.history_file)
        except FileNotFoundError:
            print("No previous history.")
        except OSError as e:
            logger.warning("could not read history %s: %s", self.history_file, e)

    def stop(self) -> None:
        if self.history_file is None:
            return
        try:
            readline.write_history_file(self.history_file)
        except OSError as e:
            logger.warning("could not save history %s: %s", self.history_file, e)

    def input(self) -> str:
        return input(self.prompt).strip()


def run(
    interpreter: Interpreter,
    read: Callable[[], str],
    write: Callable[[str], None] = print,
) -> None:
    """Drive the loop until end of input or interrupt."""
    while True:
        try:
            line = read()
        except KeyboardInterrupt:
            write("CTRL-C")
            break
        except EOFError:
            write("CTRL-D")
            break
        if not line:
            continue
        write(interpreter.eval_line(line))


def main() -> None:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter()
    repl = REPL(
        interpreter,
        history_file=config.get_history_file(),
        prompt=config.get_prompt(),
        history_length=config.get_history_length(),
    )
    repl.start()
    try:
        run(interpreter, repl.input)
    finally:
        repl.stop()


if __name__ == "__main__":
    main()
