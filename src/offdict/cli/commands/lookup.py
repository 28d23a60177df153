"""Lookup commands: one-shot and interactive."""

import sys

from rich.console import Console

from offdict.cli import client
from offdict.cli.render import render_state
from offdict.core.lookup import LoadState, LookupController

console = Console()

HELP = (
    "word      search\n"
    "<blank>   search the recalled query\n"
    ":up :down recall older / newer searches\n"
    ":N        search the N-th synonym shown\n"
    ":esc      clear query and result\n"
    ":history  list searches\n"
    ":q        quit"
)


def add_subparser(subparsers):
    lookup_p = subparsers.add_parser("lookup", help="Look up a single word")
    lookup_p.add_argument("word", help="Word to look up")
    lookup_p.add_argument("--source", help="Artifact path or URL (default: from settings)")
    lookup_p.set_defaults(func=run_lookup)

    repl_p = subparsers.add_parser("repl", help="Interactive lookup session")
    repl_p.add_argument("--source", help="Artifact path or URL (default: from settings)")
    repl_p.set_defaults(func=run_repl)


def open_controller(source: str | None) -> LookupController:
    source = source or client.default_source()
    controller = LookupController()
    with console.status("Loading dictionary…"):
        controller.load(lambda: client.fetch_dictionary(source))
    if controller.state == LoadState.FAILED:
        console.print(f"[red]✗ {controller.error}[/red] ({source})")
        sys.exit(1)
    return controller


def run_lookup(args):
    controller = open_controller(args.source)
    controller.query = args.word
    controller.search()
    render_state(console, controller)
    if controller.result is None:
        sys.exit(1)


def handle_line(controller: LookupController, line: str, tokens: list[str]) -> list[str] | None:
    """Apply one line of input. Returns the new synonym tokens, or None to quit."""
    cmd = line.strip()

    if cmd in (":q", ":quit"):
        return None
    if cmd == ":help":
        console.print(HELP)
        return tokens
    if cmd == ":history":
        for i, term in enumerate(controller.history.entries, 1):
            console.print(f"  {i:3} {term}")
        return tokens
    if cmd == ":up":
        controller.handle_key("up")
        return tokens
    if cmd == ":down":
        controller.handle_key("down")
        return tokens
    if cmd == ":esc":
        controller.handle_key("escape")
        return []
    if cmd.startswith(":") and cmd[1:].isdigit():
        n = int(cmd[1:])
        if not 1 <= n <= len(tokens):
            console.print(f"[red]No synonym {n}.[/red]")
            return tokens
        controller.select_synonym(tokens[n - 1])
        return render_state(console, controller)

    if cmd:
        controller.query = cmd
    controller.handle_key("enter")
    return render_state(console, controller)


def run_repl(args):
    controller = open_controller(args.source)
    console.print(f"[dim]{len(controller.lexicon)} entries loaded. :help for commands.[/dim]")

    tokens: list[str] = []
    while tokens is not None:
        prompt = f"search [{controller.query}]> " if controller.query else "search> "
        try:
            line = console.input(prompt)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        tokens = handle_line(controller, line, tokens)
