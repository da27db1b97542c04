# app.py

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from config.config_loader import DEFAULT_CONFIG, alphabet_from_config, load_config
from logger.logger import JSONLogger
from tools.program_inspect import build_program_table
from tools.program_loader import ProgramFormatError, load_program

console = Console()

CONFIG_PATH = Path(__file__).resolve().parent / "config" / "runtime_config.json"

HELP_LINES = [
    "Available commands:",
    "Load a new machine: insert <program file>",
    "Run a word to get the result: run [word]",
    "Run a word and show the tapes after every step: trace [word]",
    "Check if the machine accepts a word: check [word]",
    "Print all transitions: print",
    "Show the transition table: table",
    "Exit: quit",
]


@dataclass
class Session:
    config: dict
    machine: object = None
    program_path: str = None
    logger: JSONLogger = None

    @property
    def alphabet(self):
        return alphabet_from_config(self.config)


# === Utilities ===
def make_session(config):
    session = Session(config=config)
    if config["log_runs"]:
        session.logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
    return session

def error(message, out=None):
    (out or console).print(f"[red]Error! {escape(message)}[/red]", highlight=False)

def emit(text, out=None):
    # Machine output is printed verbatim.
    (out or console).print(text, markup=False, highlight=False)

def word_argument(parts, session, out=None):
    """Return the word to run, "" when omitted, or None if it is not in the alphabet."""
    if len(parts) < 2:
        return ""
    word = parts[1]
    if not session.alphabet.is_valid_word(word):
        error("Not matching the alphabet!", out)
        return None
    return word

def require_machine(session, out=None):
    if session.machine is None:
        error("No machine loaded!", out)
        return False
    return True

def log_run(session, mode, word, result):
    if session.logger is not None:
        session.logger.log_run(mode, word, result, session.program_path)


# === Command Handlers ===
def handle_insert(parts, session, out=None):
    if len(parts) < 2:
        error("Wrong amount of input!", out)
        return
    try:
        session.machine = load_program(parts[1], alphabet=session.alphabet)
        session.program_path = parts[1]
    except FileNotFoundError:
        error("No file found!", out)
    except ProgramFormatError as e:
        error(f"Parsing not possible! {e}", out)
    except OSError:
        error("Fault at IO!", out)

def handle_run(parts, session, out=None):
    if not require_machine(session, out):
        return
    word = word_argument(parts, session, out)
    if word is None:
        return
    result = session.machine.transform(word)
    log_run(session, "transform", word, result)
    emit(result, out)

def handle_trace(parts, session, out=None):
    if not require_machine(session, out):
        return
    word = word_argument(parts, session, out)
    if word is None:
        return
    printer = out or console

    def show_step(machine, transition):
        printer.print(f"[cyan]{escape(transition.render())}[/cyan]", highlight=False)
        for line in machine.visualize():
            emit(line, out)

    result = session.machine.transform(word, observer=show_step)
    log_run(session, "transform", word, result)
    emit(result, out)

def handle_check(parts, session, out=None):
    if not require_machine(session, out):
        return
    word = word_argument(parts, session, out)
    if word is None:
        return
    accepted = session.machine.decide(word)
    log_run(session, "decide", word, accepted)
    emit("accept" if accepted else "reject", out)

def handle_print(session, out=None):
    if session.machine is None:
        emit("", out)
        return
    program = session.machine.describe_program()
    if program:
        emit(program, out)

def handle_table(session, out=None):
    if require_machine(session, out):
        (out or console).print(build_program_table(session.machine))

def handle_help(out=None):
    for line in HELP_LINES:
        emit(line, out)

def execute_command(line, session, out=None):
    """Dispatch one shell line on its first letter. Returns False to quit."""
    parts = line.split()
    if not parts:
        error("Empty command", out)
        return True

    command = parts[0].lower()[0]
    if command == "q":
        return False
    elif command == "i":
        handle_insert(parts, session, out)
    elif command == "r":
        handle_run(parts, session, out)
    elif command == "c":
        handle_check(parts, session, out)
    elif command == "t":
        if parts[0].lower().startswith("ta"):
            handle_table(session, out)
        else:
            handle_trace(parts, session, out)
    elif command == "p":
        handle_print(session, out)
    elif command == "h":
        handle_help(out)
    else:
        error("Unknown command.", out)
    return True


# === Interactive Mode ===
def interactive_main(session):
    while True:
        try:
            line = console.input(session.config["prompt"])
        except EOFError:
            break
        if not execute_command(line, session):
            break

# === CLI Mode for Automation ===
def cli_main(args, session, out=None):
    if args.print:
        handle_print(session, out)
    if args.inspect:
        handle_table(session, out)
    if args.run is not None:
        handle_run(["run", args.run] if args.run else ["run"], session, out)
    if args.check is not None:
        handle_check(["check", args.check] if args.check else ["check"], session, out)

def load_runtime_config(path):
    path = Path(path)
    if not path.exists():
        if path != CONFIG_PATH:
            error(f"Configuration file {path} not found!")
            sys.exit(1)
        return DEFAULT_CONFIG.copy()
    try:
        return load_config(str(path))
    except (ValueError, TypeError) as e:
        error(f"Invalid configuration: {e}")
        sys.exit(1)

def build_parser():
    parser = argparse.ArgumentParser(description="Deterministic Multi-Tape Turing Machine Simulator")
    parser.add_argument("--config", default=str(CONFIG_PATH), help="Path to runtime_config.json")
    parser.add_argument("--program", help="Program file to load on startup")
    parser.add_argument("--run", metavar="WORD", help="Run WORD and print the output tape")
    parser.add_argument("--check", metavar="WORD", help="Check whether the machine accepts WORD")
    parser.add_argument("--print", action="store_true", help="Print all transitions")
    parser.add_argument("--inspect", action="store_true", help="Show the transition table")
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    session = make_session(load_runtime_config(args.config))

    if args.program:
        handle_insert(["insert", args.program], session)
        if session.machine is None:
            sys.exit(1)

    if args.print or args.inspect or args.run is not None or args.check is not None:
        if session.machine is None:
            error("--program is required for --run, --check, --print and --inspect.")
            sys.exit(2)
        cli_main(args, session)
    else:
        interactive_main(session)

if __name__ == "__main__":
    main()
