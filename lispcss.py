import argparse
import sys
import os
from compiler import compile_source, inspect_source, set_verbose
from sexpr.config import load_config
from sexpr.errors import CompileError

STARTER_FILE = "style.lcss"

def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)

def read_source(filepath):
    if filepath is None or filepath == "-":
        return "<stdin>", sys.stdin.read()
    if not os.path.exists(filepath):
        print(f"Error: File '{filepath}' not found.", file=sys.stderr)
        sys.exit(1)
    with open(filepath, 'r') as f:
        return filepath, f.read()

def cmd_build(args):
    set_verbose(args.verbose)
    config = load_config()
    filepath, source_code = read_source(args.filename)

    try:
        css = compile_source(filepath, source_code, strict=args.strict or config.strict, indent=config.indent)
    except CompileError as e:
        print(f"Error: Compilation Failed:\n{e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(css)
        log(f"Wrote {args.output}")
    else:
        sys.stdout.write(css)

def cmd_tree(args):
    set_verbose(args.verbose)
    _, source_code = read_source(args.filename)
    try:
        result = inspect_source(source_code, strict=args.strict or load_config().strict)
        dump = result.model_dump_json(indent=2)
    except (CompileError, ValueError) as e:
        print(f"Error: Compilation Failed:\n{e}", file=sys.stderr)
        sys.exit(1)
    print(dump)

def cmd_init(args):
    if os.path.exists(STARTER_FILE):
        log(f"{STARTER_FILE} already exists, leaving it alone")
        return
    log("Initializing project...")
    with open(STARTER_FILE, "w") as f:
        f.write(
            "(body margin (0 8px 0 8px) color var(--text-color, black)\n"
            "  (a:hover text-decoration underline))\n"
            "(ul padding 0 (li list-style none))\n"
        )
    log(f"Created {STARTER_FILE}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="lispcss: compile S-expression style sheets to CSS")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    build = subparsers.add_parser("build", help="Compile a file to CSS")
    build.add_argument("filename", nargs="?", default="-", help="File to compile (default: read from stdin)")
    build.add_argument("-o", "--output", help="Write CSS to this file instead of stdout")
    build.add_argument("--strict", action="store_true", help="Fail on malformed groups instead of dropping them")

    tree = subparsers.add_parser("tree", help="Print the parsed document as JSON")
    tree.add_argument("filename", nargs="?", default="-")
    tree.add_argument("--strict", action="store_true")

    subparsers.add_parser("init", help="Create a starter style.lcss")

    args = parser.parse_args(argv)

    if args.command == "build": cmd_build(args)
    elif args.command == "tree": cmd_tree(args)
    elif args.command == "init": cmd_init(args)
    else: parser.print_help()

if __name__ == "__main__":
    main()
