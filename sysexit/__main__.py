# sysexit/__main__.py

from sysexit import __version__ as about
from sysexit.cli.main import main

if __name__ == "__main__":
    main(prog_name=about.__title__)
