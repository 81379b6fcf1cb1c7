"""Interactive CLI application."""
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from flashcard_srs.clock import SystemClock
from flashcard_srs.config import DEFAULT_DB_PATH, DEFAULT_PROJECT, LOG_LEVEL
from flashcard_srs.db import ScheduleStore
from flashcard_srs.errors import InvalidOutcome
from flashcard_srs.models import ReviewCard, ReviewOutcome, ReviewResult, Typed, parse_outcome
from flashcard_srs.review import ReviewSession
from flashcard_srs.stats import progress_shares, time_until

console = Console()

EXIT_WORDS = ("q", "menu")


class SessionExitRequested(Exception):
    """Raised when the user leaves a review session from a prompt."""


def session_prompt(prompt: str, **kwargs) -> str:
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def parse_answer(text: str) -> ReviewOutcome:
    """Map prompt input to an outcome: a/again, g/good, or =typed answer."""
    text = text.strip()
    if text.startswith("="):
        return Typed(answer=text[1:])
    shortcuts = {"a": "again", "g": "good"}
    return parse_outcome(shortcuts.get(text.lower(), text.lower()))


def show_welcome(project_id: str):
    console.print(Panel(
        f"[bold]Flashcard Review[/bold]\n[dim]Project: {project_id}[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("review", "Review due cards"),
        ("practice", "Practice random cards (no scheduling)"),
        ("stats", "Project statistics"),
        ("add", "Add a card"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def ask_typed_or_reveal() -> ReviewOutcome | None:
    """Enter reveals the back (returns None); "=answer" grades a typed answer."""
    while True:
        text = session_prompt("[dim]Press Enter to reveal, or =answer to type it[/dim]", default="")
        if not text.strip():
            return None
        if text.strip().startswith("="):
            return parse_answer(text)
        console.print("[red]Press Enter to reveal, or start a typed answer with '='.[/red]")


def ask_rating() -> ReviewOutcome:
    while True:
        text = session_prompt("Rate yourself (a=again, g=good)")
        try:
            outcome = parse_answer(text)
        except InvalidOutcome as e:
            console.print(f"[red]{e}[/red]")
            continue
        if isinstance(outcome, Typed):
            console.print("[red]The answer is showing already, rate with a or g.[/red]")
            continue
        return outcome


def run_review_turn(session: ReviewSession, card: ReviewCard, practice: bool = False) -> ReviewResult:
    console.print(Panel(card.front, title="Practice" if practice else "Review", border_style="cyan"))
    outcome = ask_typed_or_reveal()
    if outcome is None:
        console.print(Panel(card.back, border_style="green"))
        outcome = ask_rating()
    result = session.submit_review(card.card_id, outcome, practice=practice)
    if result.graded is True:
        console.print("[green]Correct![/green]")
    elif result.graded is False:
        console.print(f"[red]Incorrect.[/red] Answer: [green]{card.back}[/green]")
    if not practice:
        console.print(f"[dim]Next review in {time_until(result.schedule.due_at, session.clock.now())}[/dim]")
    return result


def run_review_session(session: ReviewSession, project_id: str, practice: bool = False) -> int:
    """Review until nothing is due (or a practice batch is done). Returns cards reviewed."""
    reviewed = 0
    if practice:
        cards = session.get_practice_batch(project_id)
        if not cards:
            console.print("[yellow]No cards in this project yet![/yellow]")
        for card in cards:
            run_review_turn(session, card, practice=True)
            reviewed += 1
        return reviewed

    due = session.get_due(project_id)
    if not due:
        console.print("[yellow]No cards due right now![/yellow]")
        return reviewed
    console.print(f"\n[bold]Review Session[/bold] — {len(due)} cards due\n")
    card = due[0]
    while card is not None:
        run_review_turn(session, card)
        reviewed += 1
        card = session.get_next_due(project_id)
    return reviewed


def cmd_stats(session: ReviewSession, project_id: str):
    stats = session.get_stats(project_id)
    shares = progress_shares(stats)
    table = Table(title=f"Project {project_id}")
    table.add_column("Cards", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    table.add_row("Total", str(stats.total), "")
    table.add_row("Due now", str(stats.due_now), "")
    table.add_row("Mastered", str(stats.mastered), f"{shares['mastered']}%")
    table.add_row("Learning", str(stats.learning), f"{shares['learning']}%")
    table.add_row("New", str(stats.new), f"{shares['new']}%")
    console.print(table)
    console.print(f"\n  Next card: [bold]{time_until(stats.next_due_at, session.clock.now())}[/bold]")


def cmd_add(store: ScheduleStore, session: ReviewSession, project_id: str):
    front = Prompt.ask("Front")
    back = Prompt.ask("Back")
    card = store.add_card(project_id, front, back, session.clock.now())
    console.print(f"[green]Added card {card.card_id}[/green]")


def main():
    logging.basicConfig(
        level=LOG_LEVEL, format="%(message)s", handlers=[RichHandler(console=console)],
    )
    project_id = DEFAULT_PROJECT
    store = ScheduleStore(DEFAULT_DB_PATH)
    store.init()
    session = ReviewSession(store, SystemClock())

    show_welcome(project_id)

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="review").strip().lower()
        try:
            if choice == "review":
                run_review_session(session, project_id)
            elif choice == "practice":
                run_review_session(session, project_id, practice=True)
            elif choice == "stats":
                cmd_stats(session, project_id)
            elif choice == "add":
                cmd_add(store, session, project_id)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]See you next review![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Back to menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
