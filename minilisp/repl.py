"""Line-oriented front end: one prompt, one line, one evaluation.

The loop stops at the first evaluation error and re-raises it; end of input
ends it normally.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from minilisp.interpreter import Interpreter

BANNER = "Ctrl+C to exit.\n"
PROMPT = "[{count}]> "


def run(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    interp: Optional[Interpreter] = None,
) -> None:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    if interp is None:
        interp = Interpreter()

    print(BANNER, file=stdout)
    count = 1
    while True:
        stdout.write(PROMPT.format(count=count))
        stdout.flush()
        count += 1

        line = stdin.readline()
        if not line:
            break
        result = interp.eval(line.strip())
        print(result, file=stdout)
