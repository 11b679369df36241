"""Allow ``python -m refcheck``."""
from refcheck.validators.cli import main

if __name__ == "__main__":
    main()
