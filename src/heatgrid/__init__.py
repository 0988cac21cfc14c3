# SPDX-License-Identifier: MIT

from heatgrid.cleanup import register_cleanup
from heatgrid.initialize import initialize
from heatgrid.log import configure_logging
from heatgrid.terminal.app import run


def main() -> None:
    configure_logging()
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
