from stackcalc.cli import run_cli

run_cli()
