"""Nox sessions for Scale Comparison development tasks."""

from __future__ import annotations

import nox

PACKAGE = "src/scale_comparison"

nox.options.error_on_missing_interpreters = False
nox.options.sessions = ["lint", "typecheck", "tests"]


@nox.session
def lint(session: nox.Session) -> None:
    """Run ruff linting and formatting checks."""
    session.install("ruff")
    session.run("ruff", "check", ".")
    session.run("ruff", "format", "--check", ".")


@nox.session(name="lint-fix")
def lint_fix(session: nox.Session) -> None:
    """Apply ruff fixes and formatting."""
    session.install("ruff")
    session.run("ruff", "check", "--fix", ".")
    session.run("ruff", "format", ".")


@nox.session
def typecheck(session: nox.Session) -> None:
    """Run mypy with the settings from pyproject.toml."""
    session.install("-e", ".[dev]")
    session.run("mypy", PACKAGE)


@nox.session
def tests(session: nox.Session) -> None:
    """Run the pytest suite, with coverage when ``-- --cov`` is passed."""
    session.install("-e", ".[dev]")
    if "--cov" in session.posargs:
        session.install("coverage")
        session.run("coverage", "run", "--source=scale_comparison", "-m", "pytest")
        session.run("coverage", "report", "--fail-under=80", "-m")
        return
    session.run("pytest", "-q", *session.posargs)


@nox.session(name="tests-dev", venv_backend="none")
def tests_dev(session: nox.Session) -> None:
    """Fast local pytest using the active venv."""
    session.run("python", "-m", "pytest", "-q", *session.posargs, external=True)
