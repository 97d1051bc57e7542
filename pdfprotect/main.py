from pathlib import Path

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn
from rich.table import Table

from pdfprotect.config.settings import Settings
from pdfprotect.encryption.factory import EncryptorFactory
from pdfprotect.encryption.runner import ProtectionRunner
from pdfprotect.logging.logger import Log
from pdfprotect.processor.file_loader import collect_pdf_paths
from pdfprotect.processor.models import FileRecord
from pdfprotect.processor.processor import build_processor
from pdfprotect.processor.working_set import WorkingSet
from pdfprotect.report.html_report import build_report_html, save_report

app = typer.Typer(
    name="pdfprotect",
    help="Password-protect PDFs with the date of birth printed on page 1.",
    add_completion=False,
)
console = Console()

REMOVE_ANSWER = "-"


def _load_working_set(settings: Settings, paths: list[Path]) -> WorkingSet:
    file_paths = collect_pdf_paths(paths)
    if not file_paths:
        console.print("[red]Error:[/red] no PDF files given")
        raise typer.Exit(1)

    processor = build_processor(settings)
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Processing...", total=len(file_paths))

        def on_progress(index: int, total: int, file_name: str) -> None:
            progress.update(
                task,
                completed=index - 1,
                description=f"Processing {index} of {total}: {file_name}",
            )

        records = processor.process_batch(file_paths, on_progress=on_progress)
        progress.update(task, completed=len(file_paths))
    working_set = WorkingSet()
    working_set.extend(records)
    return working_set


def _review_table(working_set: WorkingSet) -> Table:
    table = Table(title=f"Review ({working_set.summary()})")
    table.add_column("File", style="cyan")
    table.add_column("DOB")
    table.add_column("Password", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Evidence", style="dim", overflow="fold")
    for record in working_set:
        status = "[green]✓[/green]" if record.error is None else "[yellow]⚠[/yellow]"
        table.add_row(
            record.file_name,
            record.dob or "—",
            _password_cell(record),
            status,
            record.text_context or record.error or "—",
        )
    return table


def _prompt_missing_passwords(working_set: WorkingSet) -> None:
    for index, record in enumerate(working_set):
        if record.is_ready:
            continue
        reason = record.error or "no password"
        password = typer.prompt(
            f"Password for {record.file_name} ({reason}, leave empty to skip)",
            default="",
            show_default=False,
        )
        if password:
            working_set.set_password(index, password)


def _password_cell(record: FileRecord) -> str:
    if not record.password:
        return "—"
    if record.password_edited:
        return f"{record.password} (edited)"
    return record.password


def _review_passwords(working_set: WorkingSet) -> None:
    """Ask for every file's password; the current one is the default."""
    index = 0
    while index < len(working_set):
        record = working_set[index]
        answer = typer.prompt(
            f"Password for {record.file_name} ({REMOVE_ANSWER} to drop)",
            default=record.password,
            show_default=bool(record.password),
        )
        if answer == REMOVE_ANSWER:
            working_set.remove(index)
            console.print(f"Dropped {record.file_name}")
            continue
        if answer != record.password:
            working_set.set_password(index, answer)
        index += 1


def _exclude_files(working_set: WorkingSet, names: list[str]) -> None:
    for index in reversed(range(len(working_set))):
        if working_set[index].file_name in names:
            removed = working_set.remove(index)
            console.print(f"Excluded {removed.file_name}")


@app.command()
def scan(
    paths: list[Path] = typer.Argument(..., help="PDF files or folders of PDFs"),
) -> None:
    """Extract DOBs and derived passwords without writing anything."""
    settings = Settings()
    Log.configure(settings.log_level)

    working_set = _load_working_set(settings, paths)
    console.print(_review_table(working_set))


@app.command()
def protect(
    paths: list[Path] = typer.Argument(..., help="PDF files or folders of PDFs"),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Folder for protected PDFs (defaults to each file's own folder)",
    ),
    report: bool = typer.Option(
        True,
        "--report/--no-report",
        help="Save an HTML protection report next to the output",
    ),
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Prompt for passwords that could not be derived",
    ),
    review: bool = typer.Option(
        False,
        "--review",
        help="Confirm or edit every password; answer - to drop the file",
    ),
    exclude: list[str] = typer.Option(
        [],
        "--exclude",
        "-x",
        help="File name to leave out of the batch (repeatable)",
    ),
) -> None:
    """Extract DOBs, encrypt every file that has a password, and report."""
    settings = Settings()
    Log.configure(settings.log_level)

    working_set = _load_working_set(settings, paths)
    console.print(_review_table(working_set))

    _exclude_files(working_set, exclude)
    if review:
        _review_passwords(working_set)
        console.print(_review_table(working_set))
    elif interactive and not working_set.all_ready:
        _prompt_missing_passwords(working_set)
    for record in working_set.pending:
        console.print(f"[yellow]Skipping[/yellow] {record.file_name}: no password")

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
    runner = ProtectionRunner(EncryptorFactory.create(settings), settings.output_suffix)
    summary = runner.run(working_set, output_dir)

    for record in working_set:
        if record.encrypt_error:
            console.print(f"[red]✗[/red] {record.file_name}: {record.encrypt_error}")
    colour = "green" if summary.success == summary.total else "yellow"
    console.print(f"[{colour}]{summary.message}[/{colour}]")

    if report and summary.output_dir is not None:
        report_path = save_report(summary.output_dir, build_report_html(working_set))
        console.print(f"Report saved to {report_path}")

    if summary.success < summary.total:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
