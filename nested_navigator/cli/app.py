"""Core CLI app setup."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

if TYPE_CHECKING:
  from structlog.typing import FilteringBoundLogger

from nested_navigator.core.comparison import ComparisonOperation
from nested_navigator.core.missing import MISSING
from nested_navigator.core.navigator import NestedNavigator, navigator
from nested_navigator.core.query_plan import QueryPlan, format_validation_errors
from nested_navigator.documents import dump_value, load_document, parse_value
from nested_navigator.logging_config import configure_logging
from nested_navigator.settings import settings

# stderr console for diagnostics, stdout console for the actual results
err_console = Console(stderr=True)
out_console = Console()

EXIT_COMMANDS = {"exit", "quit"}


def get_logger() -> FilteringBoundLogger:
  """Configure logging and return a logger instance."""
  configure_logging(settings.log_level)
  return structlog.get_logger()


app = typer.Typer(
  help="Nested Navigator: query nested JSON/YAML documents by dot-delimited paths.",
  no_args_is_help=True,
)

DocumentArg = Annotated[
  Path,
  typer.Argument(
    exists=True, file_okay=True, dir_okay=False, help="JSON or YAML document"
  ),
]
PathArg = Annotated[str, typer.Argument(help="Dot-delimited path, e.g. user.hobbies.1")]
OperationOpt = Annotated[
  ComparisonOperation, typer.Option("--op", help="Comparison operation.")
]
AllowMissingOpt = Annotated[
  bool,
  typer.Option("--allow-missing", help="Exit 0 even when the result is absent."),
]


def emit(result: Any, allow_missing: bool = False) -> None:
  """Print a result on stdout; absent results exit 1 unless allowed."""
  if result is MISSING:
    out_console.print(settings.missing_text, markup=False, highlight=False)
    if not allow_missing:
      raise typer.Exit(code=1)
    return
  out_console.print(
    dump_value(result, indent=settings.indent),
    markup=False,
    highlight=False,
    soft_wrap=True,
  )


def fail(log: FilteringBoundLogger, event: str, error: Exception) -> typer.Exit:
  """Report an error on stderr and return the exit to raise."""
  log.error(event, error=str(error))
  if isinstance(error, ValidationError):
    message = format_validation_errors(error.errors())
  else:
    message = str(error)
  err_console.print(f"Error: {message}", style="red", markup=False, highlight=False)
  return typer.Exit(code=1)


def open_at(log: FilteringBoundLogger, document: Path, path: str | None) -> NestedNavigator:
  """Load document and navigate to path (the document root when path is None)."""
  log.info("loading_document", document=str(document), path=path)
  try:
    nav = navigator(load_document(document))
  except (OSError, ValueError) as e:
    raise fail(log, "document_load_failed", e) from e
  if path is None:
    return nav
  return nav.navigate_to(path)


@app.command()
def get(
  document: DocumentArg,
  path: PathArg,
  allow_missing: AllowMissingOpt = False,
):
  """
  Print the value at a path.
  """
  log = get_logger()
  emit(open_at(log, document, path).value(), allow_missing)


@app.command()
def find(
  document: DocumentArg,
  path: PathArg,
  key: Annotated[str, typer.Argument(help="Key compared on each element")],
  value: Annotated[str, typer.Argument(help="Value to match (JSON scalar or text)")],
  op: OperationOpt = ComparisonOperation.EQUALS,
  allow_missing: AllowMissingOpt = False,
):
  """
  Print the first element of the sequence at PATH whose KEY matches VALUE.
  """
  log = get_logger()
  nav = open_at(log, document, path)
  emit(nav.find(key, parse_value(value), op).value(), allow_missing)


@app.command("filter")
def filter_(
  document: DocumentArg,
  path: PathArg,
  key: Annotated[str, typer.Argument(help="Key compared on each element")],
  value: Annotated[str, typer.Argument(help="Value to match (JSON scalar or text)")],
  op: OperationOpt = ComparisonOperation.EQUALS,
  allow_missing: AllowMissingOpt = False,
):
  """
  Print every element of the sequence at PATH whose KEY matches VALUE.
  """
  log = get_logger()
  nav = open_at(log, document, path)
  emit(nav.filter(key, parse_value(value), op).value(), allow_missing)


@app.command()
def index(
  document: DocumentArg,
  path: PathArg,
  value: Annotated[str, typer.Argument(help="Value to match (JSON scalar or text)")],
  key: Annotated[
    str | None,
    typer.Option("--key", "-k", help="Compare this key of each element."),
  ] = None,
  op: OperationOpt = ComparisonOperation.EQUALS,
  allow_missing: AllowMissingOpt = False,
):
  """
  Print the index of the first matching element of the sequence at PATH (-1 if none).
  """
  log = get_logger()
  nav = open_at(log, document, path)
  if key is None:
    result = nav.get_index(parse_value(value), MISSING, op)
  else:
    result = nav.get_index(key, parse_value(value), op)
  emit(result, allow_missing)


@app.command()
def length(
  document: DocumentArg,
  path: PathArg,
  allow_missing: AllowMissingOpt = False,
):
  """
  Print the length of the sequence at PATH.
  """
  log = get_logger()
  emit(open_at(log, document, path).get_length(), allow_missing)


@app.command()
def paths(
  document: DocumentArg,
  path: Annotated[
    str | None, typer.Option("--path", "-p", help="Start listing from this path.")
  ] = None,
  depth: Annotated[
    int | None, typer.Option("--depth", "-d", min=0, help="Maximum path depth.")
  ] = None,
  allow_missing: AllowMissingOpt = False,
):
  """
  List the dot-paths reachable in the document.
  """
  log = get_logger()
  nav = open_at(log, document, path)
  if nav.value() is MISSING:
    emit(MISSING, allow_missing)
    return
  for found in nav.paths(max_depth=settings.max_depth if depth is None else depth):
    out_console.print(found, markup=False, highlight=False, soft_wrap=True)


@app.command()
def run(
  document: DocumentArg,
  plan: Annotated[
    Path,
    typer.Argument(exists=True, file_okay=True, dir_okay=False, help="YAML query plan"),
  ],
  allow_missing: AllowMissingOpt = False,
):
  """
  Run a YAML query plan against the document.
  """
  log = get_logger()
  nav = open_at(log, document, None)
  try:
    query_plan = QueryPlan.from_yaml_file(plan)
  except (OSError, ValueError) as e:
    raise fail(log, "query_plan_invalid", e) from e

  log.info("running_query_plan", plan=str(plan), steps=len(query_plan.steps))
  emit(query_plan.run(nav.value()), allow_missing)


@app.command()
def interactive(document: DocumentArg):
  """
  Prompt for paths and print what each one resolves to.
  """
  log = get_logger()
  nav = open_at(log, document, None)

  err_console.print("Enter a path to navigate (or 'exit' to quit).", style="dim")
  while True:
    path = typer.prompt("path", default="", show_default=False, err=True)
    if path.strip().lower() in EXIT_COMMANDS:
      break
    result = nav.navigate_to(path).value()
    emit(result, allow_missing=True)
    type_name = "missing" if result is MISSING else type(result).__name__
    err_console.print(f"type: {type_name}", style="dim", markup=False)


if __name__ == "__main__":
  app()
