"""Module entrypoint for `python -m actor_schema_designer.cli`.

Delegates to the generator CLI implementation.
"""

from .run_generate import main


if __name__ == "__main__":
    main()
