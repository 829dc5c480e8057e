"""GPG agent helpers for fixing and checking commit signing."""

from .errors import SubprocessError


def kill_agent(runner):
    return runner.run("gpgconf", ["--kill", "gpg-agent"])


def connect_agent(runner):
    return runner.run("gpg-connect-agent", ["/bye"])


def reset_agent(runner):
    """
    Restart the GPG agent.

    Returns (kill_result, connect_result). A failed kill is not fatal; the
    caller decides how to report it.
    """
    killed = kill_agent(runner)
    connected = connect_agent(runner)
    return killed, connected


def sign_test_message(runner, payload="test"):
    """Clear-sign `payload` and return the signed text."""
    result = runner.run("gpg", ["--clearsign"], input=payload)
    if not result.ok:
        raise SubprocessError(
            f"GPG agent test failed. Exit code: {result.exit_code}",
            stderr=result.stderr or "No error output available",
        )
    return result.stdout
