import logging

from textual.logging import TextualHandler

from .config import Config
from .UI import StopwatchUI

def main() -> None:
    config = Config.fromEnv()
    logging.basicConfig(
        level=config.log_level, handlers=[TextualHandler()],
    )
    StopwatchUI(tick_interval=config.tick_interval).run()

if __name__ == '__main__':
    main()
