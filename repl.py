import sys

from deskcalc.runtime import HELP_TEXT, Session


def main() -> int:
    print(HELP_TEXT)
    Session(sys.stdin).run(out=sys.stdout, err=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
