"""CLI commands and entry point."""

import functools
from pathlib import Path

import click

from .config import DEFAULT_CONFIG_PATH, DEFAULT_CONFIG_TEMPLATE, __version__
from .errors import KommitError, PromptError, SubprocessError
from .git import (
    CommandRunner,
    amend,
    build_changelog,
    check,
    checkout_branch,
    commit as git_commit,
    create_branch,
    delete_branch,
    get_branches,
    get_commit_subjects,
    get_current_branch,
    get_log,
    git,
    has_staged_changes,
    merge_branch,
    push as git_push,
    rebase_onto,
    stage_all,
    stage_files,
)
from .gpg import reset_agent, sign_test_message
from .message import assemble_message
from .parsing import load_config
from .prompts import PromptEngine, read_stdin_line, select_from_menu
from .staging import (
    PostCommitAction,
    PreflightAction,
    decide_post_commit,
    decide_preflight,
    needs_staging_check,
)
from .ui import display_commit_message, report_error, report_failure, report_success

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def reports_errors(func):
    """Turn KommitError into a red message on stderr and exit status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KommitError as exc:
            report_error(exc)
            click.get_current_context().exit(1)

    return wrapper


@click.group(invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.option("-v", "--verbose", is_flag=True, help="Echo every external command before running it")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, verbose):
    """Kommit: build conventional commits from a .kommit.yaml configuration."""
    if ctx.obj is None:
        ctx.obj = CommandRunner(verbose=verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(commit)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-c",
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to the configuration file",
)
@click.pass_obj
@reports_errors
def commit(runner, config_path):
    """Generate a commit message interactively and commit it."""
    click.echo("Generating conventional commit...")
    config = load_config(config_path)
    options = config.options

    if needs_staging_check(options):
        action = decide_preflight(has_staged_changes(runner), options)
        if action is PreflightAction.AUTO_STAGE:
            click.secho("No staged changes. Auto-staging all changes (configured)...", fg="yellow")
            try:
                stage_all(runner)
            except SubprocessError as exc:
                report_error(exc)
        elif action is PreflightAction.REMIND:
            click.secho(
                "No staged changes detected. Please stage your changes before kommiting!",
                fg="yellow",
                err=True,
            )

    engine = PromptEngine(config)
    answers = engine.collect()
    message = assemble_message(answers, options)
    display_commit_message(message)

    if not engine.confirm():
        click.echo("Commit aborted.")
        return

    result = git_commit(runner, message)
    after = decide_post_commit(result.ok, options)
    if not result.ok:
        raise SubprocessError(
            f"Failed to create commit. Exit code: {result.exit_code}", stderr=result.stderr
        )
    report_success("Commit created successfully!", result)

    if after is PostCommitAction.PUSH:
        click.echo("Pushing changes (autoPush enabled)...")
        pushed = check(git_push(runner), "Push failed.")
        report_success("Push successful.", pushed)


@cli.command(name="amend", context_settings=CONTEXT_SETTINGS)
@click.option("--no-edit", is_flag=True, help="Keep the same commit message")
@click.pass_obj
@reports_errors
def amend_command(runner, no_edit):
    """Amend the last commit."""
    amend(runner, no_edit=no_edit)
    click.secho("Commit amended successfully!", fg="green")


def _write_default_config(path, force):
    config_file = Path(path)
    if config_file.exists() and not force:
        raise KommitError(f"{path} already exists. Use --force to overwrite.")
    config_file.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")
    click.secho(f"{path} has been created successfully.", fg="green")


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.option("-f", "--force", is_flag=True, help="Overwrite existing configuration file")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Where to write the configuration file",
)
@reports_errors
def create(force, config_path):
    """Create a default configuration file for Kommit."""
    _write_default_config(config_path, force)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.option("-c", "--config", "create_config", is_flag=True, help="Create a default Kommit configuration file")
@click.pass_obj
@reports_errors
def init(runner, create_config):
    """Initialize a Git repository with optional Kommit setup."""
    result = check(git(runner, "init"), "Failed to initialize Git repository.")
    report_success("Git repository initialized successfully!", result)
    if create_config:
        _write_default_config(DEFAULT_CONFIG_PATH, force=False)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.option("-n", "--number", "count", default=10, show_default=True, type=int, help="Number of commits to show")
@click.option("-p", "--pretty", is_flag=True, help="Use pretty format")
@click.option("-c", "--changelog", is_flag=True, help="Generate a changelog")
@click.option("-o", "--output", default="CHANGELOG.md", show_default=True, help="Output file path for changelog")
@click.pass_obj
@reports_errors
def log(runner, count, pretty, changelog, output):
    """Display Git logs or generate a changelog."""
    if changelog:
        subjects = get_commit_subjects(runner)
        if not subjects:
            raise KommitError("No commits found to generate changelog.")
        Path(output).write_text(build_changelog(subjects), encoding="utf-8")
        click.secho(f"Changelog generated at {output}", fg="green")
        return

    lines = get_log(runner, count=count, pretty=pretty)
    if not lines:
        click.secho("No commits found.", fg="red")
        return
    click.secho("Recent Git Commits:", fg="bright_blue")
    for line in lines:
        click.echo(line)


def _pick(options, title):
    return options[select_from_menu(options, read_stdin_line, click.echo, title)]


def _branch_actions(runner, branch, is_current):
    actions = []
    if not is_current:
        actions += ["Checkout", "Merge into current branch", "Rebase onto this branch", "Delete branch"]
    actions.append("Back")

    action = _pick(actions, f"What would you like to do with branch '{branch}'?")
    if action == "Checkout":
        checkout_branch(runner, branch)
        click.secho(f"Switched to branch '{branch}'", fg="green")
    elif action == "Merge into current branch":
        merge_branch(runner, branch)
        click.secho(f"Merged branch '{branch}' into current branch", fg="green")
    elif action == "Rebase onto this branch":
        rebase_onto(runner, branch)
        click.secho(f"Rebased current branch onto '{branch}'", fg="green")
    elif action == "Delete branch":
        delete_branch(runner, branch)
        click.secho(f"Branch '{branch}' deleted successfully!", fg="green")


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.pass_obj
@reports_errors
def branch(runner):
    """Interactive branch management."""
    while True:
        branches = get_branches(runner)
        current = get_current_branch(runner)
        click.secho("Git Branch Manager", fg="bright_blue")
        click.echo(f"Current branch: {click.style(current, fg='green')}")

        options = ["Create new branch", "List all branches", *branches, "Exit"]
        selected = _pick(options, "Select an option")

        if selected == "Exit":
            return
        if selected == "Create new branch":
            name = (read_stdin_line("Enter new branch name: ") or "").strip()
            if not name:
                raise PromptError("Branch name cannot be empty.")
            checkout = _pick(["Yes", "No"], "Would you like to checkout this branch?") == "Yes"
            create_branch(runner, name, checkout=checkout)
            click.secho(f"Branch '{name}' created successfully!", fg="green")
        elif selected == "List all branches":
            for name in branches:
                if name == current:
                    click.echo(f"* {click.style(name, fg='green')}")
                else:
                    click.echo(f"  {name}")
        else:
            try:
                _branch_actions(runner, selected, selected == current)
            except SubprocessError as exc:
                report_error(exc)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.argument("remote", required=False)
@click.option("-a", "--all", "all_remotes", is_flag=True, help="Fetch from all remotes")
@click.option("-p", "--prune", is_flag=True, help="Remove remote-tracking branches that no longer exist")
@click.pass_obj
@reports_errors
def fetch(runner, remote, all_remotes, prune):
    """Fetch from a remote repository."""
    args = ["fetch"]
    if all_remotes:
        args.append("--all")
        target = "all remotes"
    elif remote:
        args.append(remote)
        target = f"'{remote}'"
    else:
        target = "default remote"
    if prune:
        args.append("--prune")

    result = check(git(runner, *args), f"Failed to fetch from {target}.")
    report_success(f"Fetched from {target} successfully!", result)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.pass_obj
@reports_errors
def pull(runner):
    """Pull changes from the remote repository."""
    click.secho("Pulling changes from remote...", fg="bright_blue")
    result = check(git(runner, "pull"), "Failed to pull changes.")
    report_success("Changes pulled successfully!", result)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.argument("remote", required=False)
@click.argument("branch_name", metavar="BRANCH", required=False)
@click.pass_obj
@reports_errors
def push(runner, remote, branch_name):
    """Push commits to the remote repository."""
    click.secho("Pushing commits to remote...", fg="bright_blue")
    result = check(git_push(runner, remote, branch_name), "Failed to push commits.")
    report_success("Commits pushed successfully!", result)


@cli.group(context_settings=CONTEXT_SETTINGS)
def gpg():
    """GPG-related commands for managing and testing GPG signing."""


@gpg.command(name="test", context_settings=CONTEXT_SETTINGS)
@click.pass_obj
@reports_errors
def gpg_test(runner):
    """Test the GPG agent by signing a test message."""
    click.secho("Testing GPG agent...", fg="bright_blue")
    signed = sign_test_message(runner)
    click.secho("GPG agent is working correctly!", fg="green")
    click.echo("\nSigned output:")
    click.echo(signed)


@gpg.command(name="reset", context_settings=CONTEXT_SETTINGS)
@click.pass_obj
@reports_errors
def gpg_reset(runner):
    """Reset the GPG agent to fix signing issues."""
    click.secho("Resetting GPG agent...", fg="bright_blue")
    killed, connected = reset_agent(runner)
    if not killed.ok:
        report_failure("Warning: Failed to kill GPG agent.", killed)
    if not connected.ok:
        raise SubprocessError(
            f"Failed to start GPG agent. Exit code: {connected.exit_code}", stderr=connected.stderr
        )
    click.secho("GPG agent started successfully!", fg="green")


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.option("-a", "--all", "all_files", is_flag=True, help="Stage all modified and untracked files")
@click.argument("files", nargs=-1)
@click.pass_obj
@reports_errors
def stage(runner, all_files, files):
    """Stage files for commit (git add)."""
    if all_files:
        stage_all(runner)
        click.secho("All changes staged successfully!", fg="green")
    elif files:
        stage_files(runner, files)
        click.secho("Files staged successfully!", fg="green")
    else:
        raise KommitError("No files specified. Use --all to stage all files or provide file paths.")


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.pass_obj
@reports_errors
def status(runner):
    """Show the working tree status."""
    click.secho("Checking git status...", fg="bright_blue")
    result = check(git(runner, "status"), "Failed to get status.")
    click.echo(result.stdout)


@cli.command(context_settings=CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option("-l", "--list", "list_tags", is_flag=True, help="List all tags")
@click.option("-m", "--message", help="Tag message")
@click.pass_obj
@reports_errors
def tag(runner, name, list_tags, message):
    """Create or list tags."""
    if list_tags:
        result = check(git(runner, "tag"), "Failed to list tags.")
        click.echo(result.stdout or "(none)")
        return
    if not name:
        raise KommitError("Tag name required. Use --list to view existing tags.")

    args = ["tag", "-a", name, "-m", message] if message is not None else ["tag", name]
    check(git(runner, *args), "Failed to create tag.")
    click.secho(f"Tag '{name}' created successfully!", fg="green")


@cli.command(name="help", context_settings=CONTEXT_SETTINGS)
@click.pass_context
def help_command(ctx):
    """Show this help message."""
    click.echo(ctx.parent.get_help())


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
