"""taskdeck CLI - personal task tracker."""

import json
import logging
import sys
from dataclasses import replace
from datetime import date

import click

from .adapters import ApiError, JsonFileTaskRepository, TodoApiAdapter
from .config import Tokens, load_config
from .core.calendar import project_month, shift_month
from .core.engine import query
from .core.filters import FilterCriteria
from .core.integrity import report_issues
from .core.sorting import SortStrategy
from .core.stats import summarize
from .core.tasks import Notify, Priority, Status, Task, parse_iso_date, parse_iso_time
from .display import format_month, format_statistics, format_task_detail, format_task_line
from .ports import TaskRepository

STATUS_CHOICES = ["all", "pending", "completed"]
PRIORITY_CHOICES = ["all", "high", "medium", "low"]
DUE_CHOICES = ["all", "today", "tomorrow", "week", "overdue"]
SORT_CHOICES = ["date-asc", "date-desc", "priority-desc", "priority-asc"]


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _repository(ctx: click.Context) -> TaskRepository:
    """TaskRepository chosen by --file, SNAPSHOT_FILE, or the HTTP API."""
    config = ctx.obj["config"]
    path = ctx.obj["file"] or config.snapshot_file
    if path:
        return JsonFileTaskRepository(path)
    return TodoApiAdapter(config)


def _load_snapshot(ctx: click.Context) -> list[Task]:
    try:
        return _repository(ctx).fetch_all()
    except ApiError as e:
        _fail(str(e))
    except (OSError, ValueError) as e:
        _fail(f"Could not read snapshot: {e}")


def _dump(tasks: list[Task]) -> str:
    return json.dumps([t.to_api() for t in tasks], indent=2)


@click.group()
@click.version_option()
@click.option(
    "--file",
    "snapshot_file",
    type=click.Path(dir_okay=False),
    help="Use a local JSON snapshot instead of the API",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, snapshot_file: str | None, debug: bool):
    """taskdeck - personal task tracker."""
    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config()
    ctx.obj["file"] = snapshot_file


@main.command("list")
@click.option("--status", type=click.Choice(STATUS_CHOICES, case_sensitive=False), default="all")
@click.option("--priority", type=click.Choice(PRIORITY_CHOICES, case_sensitive=False), default="all")
@click.option("--due", type=click.Choice(DUE_CHOICES, case_sensitive=False), default="all")
@click.option("--search", "-s", default="", help="Match title or description")
@click.option("--sort", "sort_by", type=click.Choice(SORT_CHOICES, case_sensitive=False))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_tasks(
    ctx: click.Context,
    status: str,
    priority: str,
    due: str,
    search: str,
    sort_by: str | None,
    as_json: bool,
):
    """List tasks, filtered and sorted."""
    snapshot = _load_snapshot(ctx)
    criteria = FilterCriteria.from_params(
        status=status, priority=priority, date_bucket=due, query=search
    )
    strategy = SortStrategy.parse(sort_by or ctx.obj["config"].default_sort)
    tasks = query(snapshot, criteria, strategy)

    if as_json:
        click.echo(_dump(tasks))
        return

    if not tasks:
        if search.strip():
            click.echo("No tasks match your search.")
        else:
            click.echo("No tasks.")
        return

    for task in tasks:
        click.echo(format_task_line(task))


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def stats(ctx: click.Context, as_json: bool):
    """Show dashboard statistics."""
    settings = ctx.obj["config"].view_settings()
    snapshot = _load_snapshot(ctx)
    report_issues(snapshot)
    result = summarize(
        snapshot,
        upcoming_limit=settings.upcoming_limit,
        recent_limit=settings.recent_limit,
    )

    if as_json:
        click.echo(
            json.dumps(
                {
                    "total": result.total,
                    "completed": result.completed,
                    "pending": result.pending,
                    "completion_rate": result.completion_rate,
                    "high_priority_total": result.high_priority_total,
                    "high_priority_pending": result.high_priority_pending,
                    "today": [t.id for t in result.today_tasks],
                    "overdue": [t.id for t in result.overdue_tasks],
                    "upcoming": [t.id for t in result.upcoming_tasks],
                    "recent": [t.id for t in result.recent_tasks],
                },
                indent=2,
            )
        )
        return

    click.echo(format_statistics(result))


def _parse_month(value: str | None) -> tuple[int, int]:
    if not value:
        today = date.today()
        return today.year, today.month
    try:
        year_str, month_str = value.split("-")
        year, month = int(year_str), int(month_str)
    except ValueError:
        raise click.BadParameter("expected YYYY-MM", param_hint="--month")
    if not 1 <= month <= 12:
        raise click.BadParameter("month must be 01-12", param_hint="--month")
    return year, month


@main.command()
@click.option("--month", "month_str", help="Month to show (YYYY-MM), defaults to this month")
@click.option("--offset", type=int, default=0, help="Shift the month by N months")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def calendar(ctx: click.Context, month_str: str | None, offset: int, as_json: bool):
    """Show a month of tasks as a calendar grid."""
    year, month = shift_month(*_parse_month(month_str), offset)
    snapshot = _load_snapshot(ctx)
    report_issues(snapshot)
    buckets = project_month(snapshot, year, month)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "date": b.date.isoformat() if b.date else None,
                        "tasks": [t.id for t in b.tasks],
                    }
                    for b in buckets
                ],
                indent=2,
            )
        )
        return

    settings = ctx.obj["config"].view_settings()
    click.echo(format_month(buckets, cell_limit=settings.calendar_cell_limit))


def _repo_call(fn, *args):
    """Run a repository operation, failing cleanly on backend errors."""
    try:
        return fn(*args)
    except ApiError as e:
        _fail(str(e))
    except KeyError as e:
        _fail(e.args[0] if e.args else "No such task")
    except (OSError, ValueError) as e:
        _fail(f"Could not access snapshot: {e}")


def _validate_date(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and parse_iso_date(value) is None:
        raise click.BadParameter("expected YYYY-MM-DD")
    return value


def _validate_time(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    parsed = parse_iso_time(value)
    if parsed is None:
        raise click.BadParameter("expected HH:MM or HH:MM:SS")
    return parsed.isoformat()


def _validate_title(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise click.BadParameter("must not be empty")
    return value.strip() if value is not None else None


@main.command()
@click.argument("title", callback=_validate_title)
@click.option("--date", "due", callback=_validate_date, help="Due date (YYYY-MM-DD), defaults to today")
@click.option("--time", "time_of_day", callback=_validate_time, help="Time of day (HH:MM), all day if omitted")
@click.option("--description", "-d", default="", help="Longer description")
@click.option(
    "--priority",
    type=click.Choice(PRIORITY_CHOICES[1:], case_sensitive=False),
    default="medium",
)
@click.option("--notify/--no-notify", default=False, help="Ask for a reminder")
@click.pass_context
def add(
    ctx: click.Context,
    title: str,
    due: str | None,
    time_of_day: str | None,
    description: str,
    priority: str,
    notify: bool,
):
    """Create a task."""
    draft = Task(
        id=0,
        title=title,
        description=description,
        date=due or date.today().isoformat(),
        time=time_of_day,
        priority=Priority(priority.upper()),
        status=Status.PENDING,
        notify=Notify.YES if notify else Notify.NO,
        created_at="",
        updated_at="",
    )
    task = _repo_call(_repository(ctx).create, draft)
    click.echo(f"Created {format_task_line(task)}")


@main.command()
@click.argument("task_id", type=int)
@click.option("--title", callback=_validate_title, help="New title")
@click.option("--date", "due", callback=_validate_date, help="New due date (YYYY-MM-DD)")
@click.option("--time", "time_of_day", callback=_validate_time, help="New time of day (HH:MM)")
@click.option("--all-day", is_flag=True, help="Clear the time of day")
@click.option("--description", "-d", help="New description")
@click.option("--priority", type=click.Choice(PRIORITY_CHOICES[1:], case_sensitive=False))
@click.option("--notify/--no-notify", default=None, help="Ask for a reminder")
@click.pass_context
def edit(
    ctx: click.Context,
    task_id: int,
    title: str | None,
    due: str | None,
    time_of_day: str | None,
    all_day: bool,
    description: str | None,
    priority: str | None,
    notify: bool | None,
):
    """Change fields of an existing task. Status is left alone."""
    if all_day and time_of_day is not None:
        raise click.UsageError("--time and --all-day are mutually exclusive")

    changes = {}
    if title is not None:
        changes["title"] = title
    if due is not None:
        changes["date"] = due
    if time_of_day is not None:
        changes["time"] = time_of_day
    if all_day:
        changes["time"] = None
    if description is not None:
        changes["description"] = description
    if priority is not None:
        changes["priority"] = Priority(priority.upper())
    if notify is not None:
        changes["notify"] = Notify.YES if notify else Notify.NO
    if not changes:
        raise click.UsageError("Nothing to change")

    repo = _repository(ctx)
    current = _repo_call(repo.fetch_one, task_id)
    task = _repo_call(repo.update, replace(current, **changes))
    click.echo(f"Updated {format_task_line(task)}")


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def show(ctx: click.Context, task_id: int):
    """Show one task."""
    task = _repo_call(_repository(ctx).fetch_one, task_id)
    click.echo(format_task_detail(task))


def _set_status(ctx: click.Context, task_id: int, status: Status) -> None:
    task = _repo_call(_repository(ctx).update_status, task_id, status)
    click.echo(format_task_line(task))


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def done(ctx: click.Context, task_id: int):
    """Mark a task completed."""
    _set_status(ctx, task_id, Status.COMPLETED)


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def reopen(ctx: click.Context, task_id: int):
    """Mark a task pending again."""
    _set_status(ctx, task_id, Status.PENDING)


@main.command()
@click.argument("task_id", type=int)
@click.pass_context
def toggle(ctx: click.Context, task_id: int):
    """Flip a task between pending and completed."""
    task = _repo_call(_repository(ctx).fetch_one, task_id)
    _set_status(ctx, task_id, task.status.toggled())


@main.command()
@click.argument("task_id", type=int)
@click.confirmation_option(prompt="Delete this task?")
@click.pass_context
def delete(ctx: click.Context, task_id: int):
    """Delete a task."""
    _repo_call(_repository(ctx).delete, task_id)
    click.echo(f"Deleted task #{task_id}.")


@main.command()
@click.option("--token", prompt=True, hide_input=True, help="Bearer token for the todo API")
def login(token: str):
    """Store the todo API access token."""
    token = token.strip()
    if not token:
        _fail("Token must not be empty")
    Tokens(access_token=token).save()
    click.echo("Token saved.")


if __name__ == "__main__":
    main()
