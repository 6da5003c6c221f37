# SPDX-License-Identifier: MIT

from labtrack.cleanup import register_cleanup
from labtrack.initialize import initialize
from labtrack.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
