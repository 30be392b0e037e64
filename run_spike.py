"""CLI entry point for the Spike task-tracking chatbot."""

import argparse
import logging
import sys

from dotenv import load_dotenv

from src.commands import CommandExecutor
from src.logging_config import configure_logging
from src.parser import CommandParser
from src.tasks import TaskList

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm Spike\nWhat can I do for you?"
DIVIDER = "_" * 60


def _reply(message: str) -> None:
    print(DIVIDER)
    print(message)
    print(DIVIDER)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Chat with Spike to track your tasks")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    args = parser.parse_args(argv)
    configure_logging(level_override=args.log_level)

    tasks = TaskList()
    command_parser = CommandParser()
    executor = CommandExecutor()

    _reply(GREETING)
    try:
        while True:
            line = input()
            command = command_parser.parse_command(line, tasks)
            result = executor.execute(command, tasks)
            _reply(result.message)
            if result.is_exit:
                break
    except (KeyboardInterrupt, EOFError):
        logger.info("Input closed, ending session with %d tasks", tasks.size())
        print("\nGoodbye.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
