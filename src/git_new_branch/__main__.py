"""Module entrypoint for `python -m git_new_branch`."""

from .cli import app


def main() -> None:
    app(prog_name="gnb")


if __name__ == "__main__":
    main()
