# main.py
"""
Command-line front end for the calculator.

Runs infix lines through a :class:`~webcalc.session.Calculator`, either from
``-e`` arguments or from an interactive REPL with history and completion.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import FileHistory

from webcalc import config
from webcalc.infix_to_prefix import infix_to_prefix
from webcalc.prefix_to_infix import prefix_to_infix
from webcalc.session import CalcResult, Calculator

logger = logging.getLogger(__name__)

# --------------------------
# Help
# --------------------------

_HELP_TOPICS: Dict[str, str] = {
    'general': (
        "Calculator REPL help:\n"
        "Type an infix expression to make it the current equation, or 'name = number'\n"
        "to bind a variable; binding a variable re-evaluates the current equation.\n"
        "Examples:\n"
        "  a * a\n"
        "  a = -3           -> a * a = 9.00000000\n"
        "  (a + 2) / 4\n"
        "Commands:\n"
        "  :help, help [topic]    show help (topics: operators)\n"
        "  :vars                  list variables\n"
        "  :prefix <infix>        show the prefix form of an expression\n"
        "  :infix <prefix>        show the infix form of a prefix expression\n"
        "  :reset                 forget the equation and all variables\n"
        "  :history               show recent history\n"
        "  :exit                  exit\n"
    ),
    'operators': (
        "Operators and precedence (high -> low):\n"
        "  = (assignment, only as 'name = number')\n"
        "  * /\n"
        "  + -\n"
        "Notes:\n"
        "  - A '+' or '-' right after another operator is a sign: 'a = -3', 'h / -2'.\n"
        "  - Results are shown with eight decimals.\n"
    ),
}


def show_help(topic: Optional[str] = None) -> str:
    """Return help text for topic or general if None."""
    if not topic:
        return _HELP_TOPICS['general']
    return _HELP_TOPICS.get(topic.lower(), f"No help available for topic '{topic}'")


def render_result(result: CalcResult) -> str:
    if not result.ok:
        return f"Error: {result.value}"
    if not result.equation:
        return "ok"
    return f"{result.equation} = {result.value}"


# --------------------------
# REPL
# --------------------------

class REPL:
    """Read-Eval-Print Loop for the calculator."""

    def __init__(self, history_file: Optional[str] = None, calculator: Optional[Calculator] = None):
        self.calculator = calculator or Calculator()
        self.history_file = history_file or config.HISTORY_FILE
        self.session: Optional[PromptSession] = None

    def _process_command(self, line: str) -> Optional[str]:
        """Handle ':command' and 'help' lines. Returns None if the line is an expression."""
        s = line.strip()
        if not s:
            return None
        if s.startswith(':'):
            body = s[1:].lstrip()
            if body == '':
                return "No command specified. Use :help for available commands."
            parts = body.split(None, 1)
            cmd = parts[0]
            arg = parts[1].strip() if len(parts) > 1 else ''
            return self._run_command(cmd, arg)
        if s.lower() == 'help' or s.lower().startswith('help '):
            parts = s.split(None, 1)
            return show_help(parts[1].strip() if len(parts) > 1 else None)
        return None

    def _run_command(self, cmd: str, arg: str) -> str:
        """Execute a colon command. Raises EOFError for exit/quit."""
        cmd_lower = cmd.lower()
        if cmd_lower in {'exit', 'quit'}:
            raise EOFError()
        if cmd_lower == 'help':
            return show_help(arg or None)
        if cmd_lower == 'vars':
            items = sorted(self.calculator.variables.items())
            if not items:
                return "(no variables)"
            return "\n".join(f"{k} = {v!r}" for k, v in items)
        if cmd_lower == 'prefix':
            if not arg:
                return "Usage: :prefix <infix expression>"
            return infix_to_prefix(arg)
        if cmd_lower == 'infix':
            if not arg:
                return "Usage: :infix <prefix expression>"
            return prefix_to_infix(arg)
        if cmd_lower == 'reset':
            self.calculator.reset()
            return "Session reset."
        if cmd_lower == 'history':
            try:
                with open(self.history_file, 'r', encoding='utf-8') as f:
                    all_lines = f.read().splitlines()
            except OSError as e:
                return f"Could not read history: {e}"
            entries = [l[1:] for l in all_lines if l.startswith('+')]
            return "\n".join(entries[-50:])
        return f"Unknown command: {cmd}"

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        cmd_out = self._process_command(line)
        if cmd_out is not None:
            return True, cmd_out
        result = self.calculator.calc(line)
        return result.ok, render_result(result)

    def _completer(self) -> WordCompleter:
        words = sorted(self.calculator.variables) + [':help', ':vars', ':prefix', ':infix', ':reset', ':exit']
        return WordCompleter(words, ignore_case=True)

    def repl_loop(self) -> None:
        """Interactive loop with prompt_toolkit history and completion."""
        print("Interactive Calculator REPL. Type :help for help. Ctrl-D or :exit to quit.")
        if self.session is None:
            self.session = PromptSession(history=FileHistory(self.history_file))
        while True:
            try:
                line = self.session.prompt('> ', completer=self._completer())
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Exiting.")
                break
            if not line.strip():
                continue
            try:
                _, out = self.evaluate_line(line)
            except EOFError:
                print("Exiting.")
                break
            print(out)


# --------------------------
# Entry point
# --------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webcalc",
        description="Infix/prefix calculator with variables.",
    )
    parser.add_argument(
        "-e", "--eval", dest="expressions", action="append", default=[], metavar="EXPR",
        help="evaluate an infix expression and exit (repeatable, run in order)",
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="logging level (default: %(default)s)")
    parser.add_argument("--history-file", default=config.HISTORY_FILE, help="REPL history file")
    return parser


def run_batch(expressions: List[str], calculator: Optional[Calculator] = None) -> int:
    """Evaluate expressions in order, printing one line each. Returns the exit status."""
    calculator = calculator or Calculator()
    status = 0
    for expression in expressions:
        result = calculator.calc(expression)
        if not result.ok:
            status = 1
        print(render_result(result))
    return status


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config.configure_logging(args.log_level)
    logger.debug(f"history file: {args.history_file}")
    if args.expressions:
        return run_batch(args.expressions)
    REPL(history_file=args.history_file).repl_loop()
    return 0


if __name__ == '__main__':
    sys.exit(main())
