import sys

from ray_this.cli import main


if __name__ == "__main__":
    sys.exit(main())
