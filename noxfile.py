import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]


def _install(session: nox.Session) -> None:
    """Install the project with its test extra into the nox virtualenv."""
    session.install("-e", ".[test]")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no checkout flows)."""
    _install(session)
    session.run("pytest", "tests/storefront/domain/")


@nox.session
def demo(session: nox.Session) -> None:
    """Run the checkout demo."""
    _install(session)
    session.run("storefront-demo", *session.posargs)
