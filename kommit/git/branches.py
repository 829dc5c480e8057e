"""Branch listing and manipulation."""

from .core import check, git


def get_branches(runner):
    result = check(git(runner, "branch"), "Failed to list branches.")
    branches = []
    for line in result.stdout.splitlines():
        name = line.strip()
        if name.startswith("* "):
            name = name[2:]
        if name:
            branches.append(name)
    return branches


def get_current_branch(runner):
    result = git(runner, "branch", "--show-current")
    return result.stdout.strip() if result.ok and result.stdout.strip() else "unknown"


def create_branch(runner, name, checkout=False):
    if checkout:
        return check(git(runner, "checkout", "-b", name), "Failed to create and checkout branch.")
    return check(git(runner, "branch", name), "Failed to create branch.")


def checkout_branch(runner, name):
    return check(git(runner, "checkout", name), "Failed to checkout branch.")


def merge_branch(runner, name):
    return check(git(runner, "merge", name), "Failed to merge branch.")


def rebase_onto(runner, name):
    return check(git(runner, "rebase", name), "Failed to rebase branch.")


def delete_branch(runner, name):
    return check(git(runner, "branch", "-d", name), "Failed to delete branch.")
