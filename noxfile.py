import pathlib

import nox


ROOT = pathlib.Path(__file__).resolve().parent

EXAMPLES = sorted(ROOT.joinpath("examples").glob("*.py"))

nox.options.sessions = ["lint", "tests"]
nox.options.reuse_existing_virtualenvs = True


@nox.session
def lint(session):
    session.install(".[lint]")

    session.run("black", "--check", ".")
    session.run("flake8", ".")
    session.run("mypy", "src")


@nox.session(python=["3.13", "3.12", "3.11", "3.10", "3.9", "3.8"])
def tests(session):
    session.install(".[test]")

    files = session.posargs or ["tests"]
    session.run("pytest", *files)


@nox.session
def examples(session):
    session.install(".")

    for example in EXAMPLES:
        session.log(f"Running {example.name}")
        session.run("python", str(example))
