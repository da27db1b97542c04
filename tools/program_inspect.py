# tools/program_inspect.py

import argparse

from rich.console import Console
from rich.table import Table

from tools.program_loader import load_program

KIND_COLORS = {
    "RUNNING": "cyan",
    "HALTING": "yellow",
    "ACCEPTING": "green"
}


def build_program_table(machine, title="Transition Table"):
    """One row per transition, grouped by source state and sorted like describe_program()."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("State", justify="center")
    table.add_column("Kind", justify="center")
    table.add_column("Read (in, tapes)")
    table.add_column("Target", justify="center")
    table.add_column("Write/Move")

    for state in machine.states:
        kind = state.kind.name
        color = KIND_COLORS.get(kind, "white")
        marker = "*" if state.id == machine.start else ""
        rows = sorted(state.transitions, key=lambda t: t.render())
        if not rows:
            table.add_row(f"{state.id}{marker}", f"[{color}]{kind}[/{color}]", "-", "-", "-")
            continue
        for transition in rows:
            read = " ".join([transition.input_symbol, *transition.tape_symbols])
            writes = [transition.input_move.render()]
            for symbol, move in zip(transition.new_symbols, transition.tape_moves):
                writes.append(f"{symbol}{move.render()}")
            table.add_row(
                f"{state.id}{marker}",
                f"[{color}]{kind}[/{color}]",
                read,
                str(transition.target),
                " ".join(writes)
            )
    return table


def main():
    parser = argparse.ArgumentParser(description="Turing Machine Program Inspector")
    parser.add_argument("--program", required=True, help="Path to the program file")
    args = parser.parse_args()

    machine = load_program(args.program)
    console = Console()
    console.print(f"[bold]Program {args.program}[/bold]", highlight=False)
    console.print(f"  States: {machine.num_states}")
    console.print(f"  Work tapes: {machine.num_tapes} (+ output tape)")
    console.print(f"  Start: {machine.start}")
    console.print(build_program_table(machine))


if __name__ == "__main__":
    main()
