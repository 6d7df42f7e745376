from invoke import task


@task
def lint(c):
    c.run("ruff check .")


@task
def format_check(c):
    c.run("ruff format --check .")


@task
def test(c):
    c.run("pytest")


@task
def regression(c):
    c.run("pytest tests/test_swiss.py -k regression -v")


@task
def demo(c):
    c.run("tournament-seating seat samples/round5.yaml --show-intersections")


@task
def ci(c):
    lint(c)
    format_check(c)
    test(c)
