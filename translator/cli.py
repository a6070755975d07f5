import argparse
import subprocess  # nosec
import sys

from translator.error.error import TranslatorException
from translator.scanner.scanner import Scanner
from translator.translator import Translator


def dump_tokens(programs) -> int:
    failures = 0
    for program in programs:
        try:
            for token in Scanner(program).scan():
                print(f"{token.type.name:<10}{token.text}")
        except TranslatorException as e:
            print(e, file=sys.stderr)
            failures += 1
    return failures


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="translate",
        description="Evaluate assignments and translate them into a C program. "
        "All programs share their variables.",
    )
    parser.add_argument(
        "programs", nargs="*", help="Programs of a single assignment, e.g. 'x = 1 + 2;'"
    )
    parser.add_argument(
        "-f",
        "--file",
        action="append",
        default=[],
        dest="files",
        help="File with any number of assignments, translated after the programs",
    )
    parser.add_argument("-o", "--output", help="Write the C program to this file")
    parser.add_argument(
        "--tokens", action="store_true", help="Only print the tokens of each program"
    )
    parser.add_argument(
        "--run", action="store_true", help="Compile and run the C program with `cc`"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Trace every translation step"
    )
    args = parser.parse_args(argv)

    if args.tokens:
        return int(dump_tokens(args.programs) > 0)

    translator = Translator(debug=args.debug)
    failures = translator.translate_all(args.programs)
    for filename in args.files:
        try:
            failures += not translator.translate_file(filename)
        except OSError as e:
            print(f"Error: Could not read {filename!r}: {e.strerror}", file=sys.stderr)
            failures += 1

    code = translator.output()
    if args.output:
        with open(args.output, "w", encoding="utf8") as f:
            f.write(code.generate())
    else:
        print(code, end="")

    if args.run:
        try:
            print(code.run(), end="")
        except (OSError, subprocess.CalledProcessError) as e:
            print(f"Error: Could not run the C program: {e}", file=sys.stderr)
            return 1

    return int(failures > 0)


if __name__ == "__main__":
    sys.exit(main())
