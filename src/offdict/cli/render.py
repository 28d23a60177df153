"""
Rich rendering of lookup results.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from offdict.core.lexicon import Sense
from offdict.core.lookup import LookupController


def render_entry(console: Console, term: str, entry: dict[str, list[Sense]]) -> list[str]:
    """Print an entry. Returns the synonym tokens in display order (token N is index N-1)."""
    tokens: list[str] = []
    console.print(f"[bold]{escape(term)}[/bold]")

    for pos, senses in entry.items():
        console.print(f"\n[cyan]{pos.upper()}[/cyan]")
        for sense in senses:
            console.print(Text(f"  • {sense.definition}"))
            if not sense.synonyms:
                continue
            line = Text("    ")
            for syn in sense.synonyms:
                tokens.append(syn)
                line.append(f"[{len(tokens)}]", style="dim")
                line.append(f" {syn}  ", style="green")
            console.print(line)

    return tokens


def render_state(console: Console, controller: LookupController) -> list[str]:
    if controller.error:
        console.print(f"[red]{escape(controller.error)}[/red]")
    if controller.result is not None:
        return render_entry(console, controller.term, controller.result)
    return []
