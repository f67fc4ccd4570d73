"""Diary CLI - password-gated personal journal."""

import json
import logging
import sys
from datetime import date, datetime, time

import click

from .config import load_config
from .core.entries import DiaryEntry
from .core.errors import DiaryError
from .core.formatting import format_entry_line, format_timestamp, timestamp_to_datetime, truncate
from .frontend import BatchEntry, OperationResponse
from .workflows import apply_pending, get_command_queue, get_front_end, get_queries

secret_option = click.option(
    "--secret",
    envvar="DIARY_SECRET",
    prompt="Secret phrase",
    hide_input=True,
    help="Secret phrase (or set DIARY_SECRET)",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")


def _fail(error: DiaryError, as_json: bool = False) -> None:
    """Report a diary error and exit non-zero."""
    if as_json:
        click.echo(json.dumps({"error": {"type": type(error).__name__, "message": str(error)}}, indent=2))
    else:
        click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _show_response(response: OperationResponse) -> None:
    marker = "✓" if response.success else "✗"
    click.echo(f"{marker} {response.message}", err=not response.success)


def _show_entries(entries: list[DiaryEntry], as_json: bool, empty_msg: str = "No entries.") -> None:
    """Shared entry list display logic."""
    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo(empty_msg)
        return

    for entry in entries:
        click.echo(format_entry_line(entry))
        preview = " ".join(entry.content.split())
        click.echo(f"       {truncate(preview)}")


def _parse_bound(value: str, end: bool = False) -> int:
    """Microsecond timestamp, or an ISO date (start or end of that day)."""
    if value.isdigit():
        return int(value)
    try:
        day = date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected a timestamp or YYYY-MM-DD date, got {value!r}")
    moment = datetime.combine(day, time.max if end else time.min)
    return int(moment.timestamp() * 1_000_000)


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Diary - password-gated personal journal."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


# ============== Mutation requests ==============


@main.command()
@click.option(
    "--secret",
    envvar="DIARY_SECRET",
    prompt="Choose a secret phrase",
    hide_input=True,
    confirmation_prompt=True,
    help="Secret phrase (or set DIARY_SECRET)",
)
def init(secret: str):
    """Initialize the diary with a secret phrase."""
    config = load_config()
    try:
        _show_response(get_front_end(config).initialize(secret))
    except DiaryError as e:
        _fail(e)


@main.command()
@click.argument("title")
@click.argument("content", required=False)
@secret_option
def add(title: str, content: str | None, secret: str):
    """Add an entry. Content is read from stdin when omitted."""
    config = load_config()
    if content is None:
        content = click.get_text_stream("stdin").read().strip()
    try:
        _show_response(get_front_end(config).add_entry(secret, title, content))
    except DiaryError as e:
        _fail(e)


@main.command()
@click.argument("entry_id", type=int)
@click.option("--title", default=None, help="New title")
@click.option("--content", default=None, help="New content")
@secret_option
def update(entry_id: int, title: str | None, content: str | None, secret: str):
    """Update the title and/or content of an entry."""
    config = load_config()
    try:
        _show_response(get_front_end(config).update_entry(secret, entry_id, title, content))
    except DiaryError as e:
        _fail(e)


@main.command()
@click.argument("entry_id", type=int)
@secret_option
def delete(entry_id: int, secret: str):
    """Delete an entry."""
    config = load_config()
    try:
        _show_response(get_front_end(config).delete_entry(secret, entry_id))
    except DiaryError as e:
        _fail(e)


def _text(value) -> str:
    """String field of an imported item; anything else counts as empty."""
    return value if isinstance(value, str) else ""


@main.command("import")
@click.argument("source", type=click.File("r"))
@secret_option
def import_entries(source, secret: str):
    """Add many entries from a JSON file of [{"title": ..., "content": ...}]."""
    config = load_config()
    try:
        items = json.load(source)
    except json.JSONDecodeError as e:
        click.echo(f"Error: invalid JSON: {e}", err=True)
        sys.exit(1)
    if not isinstance(items, list):
        click.echo("Error: expected a JSON list of entries", err=True)
        sys.exit(1)

    # None marks a slot answered by the front end, in item order
    responses: list[OperationResponse | None] = []
    batch = []
    for item in items:
        if isinstance(item, dict):
            batch.append(BatchEntry(title=_text(item.get("title")), content=_text(item.get("content"))))
            responses.append(None)
        else:
            responses.append(
                OperationResponse.err(f"Skipped {json.dumps(item)}: expected an object with title and content")
            )

    if batch or not items:
        try:
            scheduled = iter(get_front_end(config).add_entries(secret, batch))
        except DiaryError as e:
            _fail(e)
        responses = [r if r is not None else next(scheduled) for r in responses]
    for response in responses:
        _show_response(response)


# ============== Host executor ==============


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def apply(as_json: bool):
    """Apply all scheduled commands now."""
    config = load_config()
    results = apply_pending(config)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "seq": r.seq,
                        "command": r.command,
                        "success": r.success,
                        "message": r.message,
                        "entry_id": r.entry_id,
                    }
                    for r in results
                ],
                indent=2,
            )
        )
        return

    if not results:
        click.echo("Nothing to apply.")
        return

    for r in results:
        marker = "✓" if r.success else "✗"
        click.echo(f"{marker} #{r.seq} {r.command}: {r.message}")


@main.command()
def worker():
    """Run the background worker that applies scheduled commands."""
    from .worker import run_worker

    click.echo("Starting Diary worker...")
    click.echo("Press Ctrl+C to stop")
    try:
        run_worker()
    except KeyboardInterrupt:
        click.echo("\nWorker stopped.")


# ============== Queries ==============


@main.command()
@json_option
def status(as_json: bool):
    """Show diary status."""
    config = load_config()
    queries = get_queries(config)
    pending = len(get_command_queue(config).pending())

    info = {
        "isInitialized": queries.is_initialized(),
        "owner": queries.owner(),
        "entryCount": queries.entry_count(),
        "nextEntryId": queries.next_entry_id(),
        "pendingCommands": pending,
    }
    if as_json:
        click.echo(json.dumps(info, indent=2))
        return

    if not info["isInitialized"]:
        click.echo("Diary not initialized. Run 'diary init'.")
    else:
        click.echo(f"Owner:    {info['owner']}")
        click.echo(f"Entries:  {info['entryCount']}")
    if pending:
        click.echo(f"Pending:  {pending} command(s) waiting (run 'diary apply')")


@main.command("list")
@json_option
def list_entries(as_json: bool):
    """List all entries, newest first."""
    config = load_config()
    _show_entries(get_queries(config).entries(), as_json)


@main.command()
@click.argument("entry_id", type=int)
@json_option
def show(entry_id: int, as_json: bool):
    """Show one entry."""
    config = load_config()
    entry = get_queries(config).entry(entry_id)

    if as_json:
        click.echo(json.dumps(entry.to_dict() if entry else None, indent=2))
        return

    if entry is None:
        click.echo(f"No entry {entry_id}.")
        return

    when = timestamp_to_datetime(entry.timestamp)
    click.echo(f"# {entry.title}")
    click.echo(f"{format_timestamp(entry.timestamp)} ({when.isoformat(timespec='seconds')})\n")
    click.echo(entry.content)


@main.command()
@click.argument("limit", type=int, default=5)
@json_option
def latest(limit: int, as_json: bool):
    """Show the LIMIT most recent entries."""
    config = load_config()
    try:
        entries = get_queries(config).latest_entries(limit)
    except DiaryError as e:
        _fail(e, as_json)
    _show_entries(entries, as_json)


@main.command("range")
@click.argument("start")
@click.argument("end")
@json_option
def range_cmd(start: str, end: str, as_json: bool):
    """Entries between START and END (timestamps or YYYY-MM-DD, inclusive)."""
    config = load_config()
    try:
        entries = get_queries(config).entries_in_range(_parse_bound(start), _parse_bound(end, end=True))
    except DiaryError as e:
        _fail(e, as_json)
    _show_entries(entries, as_json, "No entries in range.")


@main.command()
@click.argument("query")
@click.option("--content", "in_content", is_flag=True, help="Search content instead of titles")
@json_option
def search(query: str, in_content: bool, as_json: bool):
    """Case-insensitive search over titles (or content)."""
    config = load_config()
    queries = get_queries(config)
    entries = queries.search_by_content(query) if in_content else queries.search_by_title(query)
    _show_entries(entries, as_json, "No matching entries.")


if __name__ == "__main__":
    main()
