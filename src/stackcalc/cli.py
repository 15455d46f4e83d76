import logging

import typer

from stackcalc.evaluator import evaluate_with_trace
from stackcalc.exceptions import StackCalcError
from stackcalc.extractor import extract_digit_runs

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Evaluate integer expressions and extract digit runs.")


@cli.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every reduction"),
):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


@cli.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression such as '3 + 4 * 2'"),
    trace: bool = typer.Option(False, "--trace", help="Print each reduction"),
):
    try:
        value, steps = evaluate_with_trace(expression)
    except StackCalcError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    if trace:
        for step in steps:
            typer.echo(step)
    typer.echo(value)


@cli.command("digits")
def digits_command(
    text: str = typer.Argument(..., help="Text to scan for digit runs"),
):
    try:
        runs = extract_digit_runs(text.encode())
    except StackCalcError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(" ".join(map(str, runs)))


def run_cli():
    cli()


if __name__ == "__main__":
    run_cli()
