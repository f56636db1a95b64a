import logging
import sys

from task_manager.observability.logging import setup_logging

logger = logging.getLogger("taskmanager.console")


class ProcessService:
    """Extension point for console work; currently does nothing."""

    def process(self) -> None:
        logger.debug("console.process", extra={"category": "console", "event": "console.process"})


class ConsoleUI:
    def __init__(self, service: ProcessService):
        self.service = service

    def run(self) -> None:
        print("Console UI started")
        self.service.process()


def main() -> int:
    # stderr only; stdout carries the UI output
    setup_logging("WARNING")
    ConsoleUI(ProcessService()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
