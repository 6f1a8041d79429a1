# -*- coding: utf-8 -*-
"""
tinybasic 대화형 셸
실행: python -m tinybasic [--max-steps N] [--debug]
"""

import logging
import sys
from argparse import ArgumentParser

from .errors import BasicRuntimeError, BasicSyntaxError
from .interpreter import Interpreter


def report(e, file=None):
    msg = f"❌ {type(e).__name__}: {e}"
    if getattr(e, 'line_number', None) is not None:
        msg += f" (in line {e.line_number})"
    print(msg, file=file if file is not None else sys.stdout)


def repl(interp, read=input, prompt="> ", file=None):
    """Read lines until EOF, feeding each one to the interpreter."""
    while True:
        try:
            line = read(prompt)
        except EOFError:
            break
        except KeyboardInterrupt:
            print("\nBreak", file=file if file is not None else sys.stdout)
            continue
        if not line.strip():
            continue
        try:
            interp.feed(line)
        except (BasicSyntaxError, BasicRuntimeError) as e:
            report(e, file)
        except KeyboardInterrupt:
            # Ctrl-C 로 실행 중인 RUN 중단
            print("\nBreak", file=file if file is not None else sys.stdout)


def main(argv=None):
    cmd = ArgumentParser(prog="tinybasic", description="Line-numbered BASIC interpreter")
    cmd.add_argument("--max-steps", type=int, default=None,
                     help="stop a RUN after this many statements")
    cmd.add_argument("--prompt", default="> ")
    cmd.add_argument("--debug", action="store_true", help="log interpreter activity")
    args = cmd.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    print("tinybasic ready")
    repl(Interpreter(max_steps=args.max_steps), prompt=args.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
