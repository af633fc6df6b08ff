"""
This runs keyscript programs stored as JSON expression trees.

{0}

For example:

    keyscript program.json

will run the script (a JSON list of expressions) in program.json.

    keyscript -p text program.json

will load the bundled text plugin first.

    keyscript -h

will explain all the arguments.
"""
import sys, argparse, json, logging
from pathlib import Path

from keyscript.config import get_log_level
from keyscript.errors import KeyScriptError

parser = argparse.ArgumentParser(
    prog="keyscript",
    description="Runner for data-encoded keyscript programs.",
)
parser.add_argument("program", help="a JSON file holding a script, or a single expression.")
parser.add_argument('-p', "--plugin", action="append", default=[], help="Load a plugin module before running. May be repeated.")
parser.add_argument('-n', "--no-autoload", action="store_true", help="Ignore KEYSCRIPT_PLUGINS.")
parser.add_argument('-v', "--verbose", action="count", default=0, help="Log more. Repeat for debug output.")

def _configure_logging(verbose):
    level = logging.getLevelName(get_log_level())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbose:
        level = min(level, logging.INFO if verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

def load_program(path):
    script = json.loads(Path(path).read_text(encoding="utf-8"))
    return script if isinstance(script, list) else [script]

def run(args):
    from keyscript.interpreter import Interpreter
    _configure_logging(args.verbose)
    try:
        script = load_program(args.program)
    except (OSError, ValueError) as ex:
        print("Cannot read %s: %s"%(args.program, ex), file=sys.stderr)
        return 1
    try:
        interpreter = Interpreter(plugins=None if args.no_autoload else 'auto')
        for name in args.plugin:
            interpreter.load_plugin(name)
        interpreter.run(script)
    except KeyScriptError as ex:
        print(ex, file=sys.stderr)
        return 1
    return 0

def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        return run(parser.parse_args(argv))
    print(__doc__.strip().format(parser.format_usage()))
    return 0
