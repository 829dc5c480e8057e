"""Display utilities and UI helpers."""

import click


def display_commit_message(message):
    """Print the generated message with its header highlighted."""
    header, _, rest = message.partition("\n")
    click.secho("\nGenerated Commit Message:", fg="yellow")
    click.secho(header, bold=True)
    if rest:
        click.echo(rest)


def report_success(message, result=None):
    click.secho(message, fg="green")
    if result is not None and result.stdout:
        click.echo(result.stdout)


def report_error(exc):
    """Print a KommitError (and any captured stderr) in red on stderr."""
    click.secho(f"Error: {exc}", fg="red", err=True)
    stderr = getattr(exc, "stderr", "")
    if stderr:
        click.secho(stderr, fg="red", err=True)


def report_failure(message, result):
    click.secho(f"{message} Exit code: {result.exit_code}", fg="red", err=True)
    if result.stderr:
        click.secho(result.stderr, fg="red", err=True)
