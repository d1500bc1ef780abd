"""
Main entry point for Gestor de Contactos.

Interactive CLI for importing planillas and vCards, reviewing contacts and
exporting the merged collection.

File: main.py
Created: 2026-10-15
Last Modified: 2026-10-17
"""

import asyncio
from datetime import datetime
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt, Confirm
from rich.table import Table
from rich import box

from gestor.config import GestorConfig

console = Console()

load_dotenv()
config = GestorConfig.from_env()

config.log_dir.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s | %(levelname)-8s | %(message)s',
    handlers=[
        logging.FileHandler(config.log_dir / f"gestor_{datetime.now().strftime('%Y-%m-%d')}.log"),
        logging.StreamHandler()
    ]
)
log = logging.getLogger(__name__)

ACTIONS = {
    "1": {"name": "Import", "description": "Merge a planilla (.csv) or agenda (.vcf) file"},
    "2": {"name": "Stats", "description": "Contacts per status"},
    "3": {"name": "List", "description": "Show contacts, filtered by status or search"},
    "4": {"name": "Review", "description": "Walk through contacts and set their status"},
    "5": {"name": "Export", "description": "Write planilla CSV or vCard"},
    "6": {"name": "Delete", "description": "Remove one contact by id"},
    "c": {"name": "Clear", "description": "Delete the whole collection"},
}

STATUS_STYLES = {
    "sin revisar": "grey62",
    "jugando": "magenta",
    "contactado": "green",
    "no interesado": "red",
    "sin wsp": "dim",
}


def show_menu():
    """Display the main menu."""
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Gestor de Contactos[/] - Planilla + Agenda",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Key", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Description", style="dim")

    for key, action in ACTIONS.items():
        table.add_row(key, action["name"], action["description"])

    console.print(table)
    console.print("  [cyan]q[/]  Quit")
    console.print()


def _identity():
    from gestor.reconcile import get_identity_strategy

    return get_identity_strategy(config.identity, config.phone_region)


def _parse_status(value: str):
    from gestor.models import ContactStatus

    value = value.strip().lower()
    for status in ContactStatus:
        if value in (status.value, status.name.lower(), status.label.lower()):
            return status
    return None


def _contacts_table(contacts) -> Table:
    table = Table(box=box.SIMPLE_HEAVY, show_header=True, header_style="bold")
    table.add_column("Id", style="dim", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Phone", style="cyan")
    table.add_column("Status")
    table.add_column("Origin", style="dim")
    table.add_column("Seen", justify="center")
    table.add_column("Recovered", justify="center")

    for c in contacts:
        style = STATUS_STYLES.get(c.status.value, "white")
        table.add_row(
            c.id[:8],
            c.name,
            c.phone or "-",
            f"[{style}]{c.status.label}[/]",
            c.origin.value,
            "✓" if c.seen_replied else "",
            "✓" if c.recovered else "",
        )
    return table


async def run_import(path: str):
    """Import one file into the stored collection."""
    from gestor.service import detect_format, import_file

    source = Path(path).expanduser()
    if not source.exists():
        console.print(f"[red]File not found: {source}[/]")
        return
    if detect_format(source) is None:
        console.print(f"[red]Unsupported file type: {source.suffix or '(none)'}[/] [dim](use .csv, .vcf or .vcard)[/]")
        return

    contacts, summary = await import_file(
        source,
        store_key=config.store_key,
        db_path=config.db_path,
        identity=_identity(),
    )

    if summary.total == 0:
        console.print("[yellow]No contacts imported.[/] [dim]Check the file format.[/]")
        return
    console.print(
        f"[green]Import complete![/] {summary.added:,} new, {summary.updated:,} updated "
        f"→ {len(contacts):,} contacts"
    )


async def run_stats():
    """Show contacts per status."""
    from gestor.database import load_collection
    from gestor.models import ContactStatus
    from gestor.reconcile import status_counts

    contacts = await load_collection(config.store_key, config.db_path)
    counts = status_counts(contacts)

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Status", style="white")
    table.add_column("Count", justify="right", style="cyan")
    table.add_column("Share", justify="right", style="dim")

    total = counts["total"]
    for status in ContactStatus:
        count = counts[status.value]
        share = f"{count / total:.0%}" if total else "-"
        style = STATUS_STYLES.get(status.value, "white")
        table.add_row(f"[{style}]{status.label}[/]", f"{count:,}", share)
    table.add_row("[bold]Total[/]", f"[bold]{total:,}[/]", "")

    console.print(table)


async def run_list(status_name: str = "", search: str = ""):
    """List contacts, optionally filtered."""
    from gestor.database import load_collection
    from gestor.reconcile import filter_contacts

    status = None
    if status_name and status_name.lower() != "all":
        status = _parse_status(status_name)
        if status is None:
            console.print(f"[red]Unknown status: {status_name}[/]")
            return

    contacts = await load_collection(config.store_key, config.db_path)
    shown = filter_contacts(contacts, status=status, search=search)
    console.print(_contacts_table(shown))
    console.print(f"[dim]{len(shown):,} of {len(contacts):,} contacts[/]")


async def run_review(status_name: str = "sin revisar"):
    """Step through contacts of one status and classify each."""
    from gestor.database import load_collection, save_collection
    from gestor.models import ContactStatus
    from gestor.reconcile import filter_contacts, set_status

    keys = {
        "j": ContactStatus.PLAYING,
        "c": ContactStatus.CONTACTED,
        "n": ContactStatus.NOT_INTERESTED,
        "w": ContactStatus.NO_MESSAGING,
    }

    status = _parse_status(status_name)
    contacts = await load_collection(config.store_key, config.db_path)
    queue = filter_contacts(contacts, status=status)
    if not queue:
        console.print("[green]Nothing to review.[/]")
        return

    console.print("[dim]j=Jugando  c=Contactado  n=No Interesado  w=Sin WSP  s=skip  q=stop[/]")
    changed = 0
    for i, contact in enumerate(queue, start=1):
        console.print(f"\n[bold]{i}/{len(queue)}[/] {contact.name} [cyan]{contact.phone or ''}[/]")
        choice = Prompt.ask("Status", choices=list(keys) + ["s", "q"], default="s")
        if choice == "q":
            break
        if choice == "s":
            continue
        contacts = set_status(contacts, contact.id, keys[choice])
        changed += 1

    if changed:
        await save_collection(contacts, config.store_key, config.db_path)
    console.print(f"[green]Updated {changed} contacts.[/]")


async def run_export(kind: str, out: str = ""):
    """Export the collection as planilla CSV or vCard."""
    from gestor.export import EXPORT_KINDS, export_filename
    from gestor.service import export_file

    kind = kind.lower()
    if kind not in EXPORT_KINDS:
        console.print(f"[red]Unknown export format: {kind}[/] [dim](csv or vcf)[/]")
        return

    out_path = Path(out) if out else config.export_dir / export_filename(kind)
    count = await export_file(kind, out_path, config.store_key, config.db_path)
    console.print(f"[green]Exported {count:,} contacts[/] → {out_path}")


async def run_delete(contact_id: str):
    """Delete one contact, matching a full id or a unique id prefix."""
    from gestor.database import load_collection, save_collection
    from gestor.reconcile import delete_contact

    contacts = await load_collection(config.store_key, config.db_path)
    matches = [c for c in contacts if c.id.startswith(contact_id)]
    if len(matches) != 1:
        console.print(f"[red]{len(matches)} contacts match id '{contact_id}'.[/]")
        return

    target = matches[0]
    if not Confirm.ask(f"Delete {target.name}?", default=False):
        console.print("[dim]Skipped.[/]")
        return

    await save_collection(delete_contact(contacts, target.id), config.store_key, config.db_path)
    console.print(f"[green]Deleted {target.name}.[/]")


async def run_clear(confirm: bool = True):
    """Delete every contact."""
    from gestor.database import save_collection
    from gestor.reconcile import clear_contacts

    if confirm and not Confirm.ask("Delete the whole collection?", default=False):
        console.print("[dim]Skipped.[/]")
        return

    await save_collection(clear_contacts(), config.store_key, config.db_path)
    console.print("[green]Collection cleared.[/]")


async def run_action(choice: str):
    """Run one menu action, prompting for its arguments."""
    console.rule(f"[bold]{ACTIONS[choice]['name']}")

    if choice == "1":
        await run_import(Prompt.ask("File path"))
    elif choice == "2":
        await run_stats()
    elif choice == "3":
        status = Prompt.ask("Status (blank for all)", default="")
        search = Prompt.ask("Search (name or phone)", default="")
        await run_list(status, search)
    elif choice == "4":
        await run_review(Prompt.ask("Review contacts with status", default="sin revisar"))
    elif choice == "5":
        kind = Prompt.ask("Format", choices=["csv", "vcf"], default="csv")
        await run_export(kind, Prompt.ask("Output path (blank for default)", default=""))
    elif choice == "6":
        await run_delete(Prompt.ask("Contact id"))
    elif choice == "c":
        await run_clear()


async def run_command(args):
    """Non-interactive use: main.py <command> [args...]"""
    command = args[0].lower()
    rest = args[1:]

    if command == "import" and rest:
        for path in rest:
            await run_import(path)
    elif command == "export" and rest:
        await run_export(rest[0], rest[1] if len(rest) > 1 else "")
    elif command == "stats":
        await run_stats()
    elif command == "list":
        await run_list(rest[0] if rest else "", rest[1] if len(rest) > 1 else "")
    elif command == "delete" and rest:
        await run_delete(rest[0])
    elif command == "clear":
        await run_clear(confirm="--yes" not in rest)
    else:
        console.print(f"[red]Unknown command: {' '.join(args)}[/]")
        console.print("[dim]Commands: import <file>..., export csv|vcf [out], stats, list [status] [search], delete <id>, clear [--yes][/]")


async def main():
    """Main entry point with interactive menu."""
    if len(sys.argv) > 1:
        await run_command(sys.argv[1:])
        return

    # Interactive mode
    while True:
        show_menu()

        choice = Prompt.ask(
            "Select action",
            choices=list(ACTIONS.keys()) + ["q"],
            default="q",
        )

        if choice == "q":
            console.print("[dim]Goodbye![/]")
            break

        await run_action(choice)

        console.print()
        if not Confirm.ask("Continue?", default=True):
            console.print("[dim]Goodbye![/]")
            break


if __name__ == "__main__":
    asyncio.run(main())
