"""Allow ``python -m create_stb`` invocation."""

from create_stb.cli import app


if __name__ == "__main__":
    app(prog_name="create-stb")
