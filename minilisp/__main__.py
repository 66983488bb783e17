import sys

from minilisp.config import configure_logging
from minilisp.errors import MiniLispError
from minilisp.repl import run


def main() -> int:
    configure_logging()
    try:
        run()
    except MiniLispError as ex:
        print(f"\nerror: {ex}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
