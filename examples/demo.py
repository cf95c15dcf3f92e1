#!/usr/bin/env python3
"""
Demonstration of the clop option parser.

Usage:
    python demo.py -i 5 --int2=7 -ab Alice 42     # bundled booleans, inline value
    python demo.py -r 2.5 -s hello -- -not-a-flag # literal arguments after --
    python demo.py -h                             # help with defaults
"""

import pathlib
import sys

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.append(project_root) if project_root not in sys.path else None

from clop import AttrRef, ClopError, OptionParser, Var

SYNOPSIS = "Test program that uses clop"
VERSION = "1"


class Settings:
    """Options may also be bound to attributes of an existing object."""

    def __init__(self) -> None:
        self.string2 = ""


def main() -> int:
    usage = f"{sys.argv[0]} [options] <your name> <your age>"
    parser = OptionParser()
    # negative numbers are accepted as arguments
    parser.hyphen_arg_error = False

    int1 = Var(1)
    parser.add(int1, "-i", "--int1", "integer option #1")
    int2 = Var(2)
    parser.add(int2, "-j", "--int2", "integer option #2")
    double1 = Var(3.14)
    parser.add(double1, "-r", "--double1", "double option #1")
    string1 = Var(None)
    parser.add(string1, "-s", "string option #1")
    settings = Settings()
    parser.add(AttrRef(settings, "string2"), "-t", "string option #2")

    bool1, bool2, bool3, bool4 = Var(False), Var(False), Var(True), Var(True)
    parser.add(bool1, "-a", "bool option #1")
    parser.add(bool2, "-b", "bool option #2")
    parser.add(bool3, "-c", "bool option #3")
    parser.add(bool4, "-d", "bool option #4")

    g = Var("8")
    parser.add(g, "-g", "char option", kind="char")

    show_help = Var(False)
    parser.add(show_help, "-h", "--help", "print usage and exit")

    try:
        args = parser.parse()
    except ClopError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if show_help.value:
        parser.help(sys.stderr, SYNOPSIS, VERSION, usage, True)
        return 1

    print(f"program info: {parser.procinfo(sys.argv, VERSION)}")

    for i, arg in enumerate(args, start=1):
        print(f'argument #{i} is: "{arg}"')
    print(f"--- {len(args)} arguments.")

    print(
        f"integer option #1 is ({'set' if parser.is_set(int1) else 'default'}):"
        f" {int1.value}"
    )
    print(
        f"integer option #2 is ({'set' if parser.is_set('--int2') else 'default'}):"
        f" {int2.value}"
    )
    print(f"double option #1 is: {double1.value}")
    if string1.value is None:
        print("string option #1 is None")
    else:
        print(f'string option #1 is: "{string1.value}"')
    print(f'string option #2 is: "{settings.string2}"')

    for n, (var, ref) in enumerate(
        [(bool1, bool1), (bool2, "-b"), (bool3, bool3), (bool4, bool4)], start=1
    ):
        state = "set" if parser.is_set(ref) else "not set"
        print(f"bool option #{n} is: {str(var.value).lower()} ({state})")

    print(f"char option is: '{g.value}'")
    print("all done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
