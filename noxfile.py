"""Nox sessions for the creator-intel test, lint and smoke runs."""

import nox

nox.options.sessions = ["tests", "lint", "typecheck"]

SAMPLE_PROFILES = "data/sample_profiles.json"


@nox.session(python=["3.11", "3.12", "3.13"])
def tests(session: nox.Session) -> None:
    """Run the test suite."""
    session.install(".[dev]")
    session.run("pytest", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff over sources and tests."""
    session.install(".[dev]")
    session.run("ruff", "check", "src", "tests")
    session.run("ruff", "format", "--check", "src", "tests")


@nox.session
def typecheck(session: nox.Session) -> None:
    """Type-check the package."""
    session.install(".[dev]")
    session.run("mypy", "src")


@nox.session
def coverage(session: nox.Session) -> None:
    """Run tests with HTML/XML coverage and a floor."""
    session.install(".[dev]")
    session.run(
        "pytest",
        "--cov=creator_intel",
        "--cov-report=html",
        "--cov-report=xml",
        "--cov-fail-under=90",
    )


@nox.session
def smoke(session: nox.Session) -> None:
    """Run both CLI modes against the bundled sample profiles."""
    session.install(".")
    session.run("creator-intel", "landscape", "--profiles", SAMPLE_PROFILES)
    session.run(
        "creator-intel",
        "benchmark",
        "--profiles",
        SAMPLE_PROFILES,
        "--target",
        "dancewithmia",
    )
