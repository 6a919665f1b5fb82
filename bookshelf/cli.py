"""Line-oriented command interpreter for the book collection."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from bookshelf.codec.factories import BookFactory
from bookshelf.core.config import settings
from bookshelf.core.logging import setup_logging
from bookshelf.domain import ArgumentCountError, DomainError, UnknownCommandError
from bookshelf.repositories.in_memory import ItemCollection
from bookshelf.services import BookCollectionService, parse_book_fields, parse_index

logger = logging.getLogger(__name__)

COMMAND_ALIASES = {
    "l": "load",
    "s": "save",
    "c": "clean",
    "a": "add",
    "r": "remove",
    "u": "update",
    "v": "view",
}

COMPLETION_MESSAGE = "Execution completed successfully"


class CommandInterpreter:
    """Dispatches tokenised command lines to the collection service.

    Each command either completes or raises a DomainError; ``run`` stops at
    the first failure.
    """

    def __init__(
        self,
        service: BookCollectionService,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        default_data_file: str | None = None,
    ) -> None:
        self._service = service
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._default_data_file = default_data_file or settings.default_data_file

    def run(self, lines: Iterable[str]) -> int:
        """Execute lines until a blank line or end of input. Returns exit code."""
        for line in lines:
            args = line.split()
            if not args:
                break
            try:
                self.execute(args)
            except DomainError as e:
                logger.debug(f"Command {args[0]!r} failed: {e.code}")
                print(e.message, file=self._stderr)
                return 1

        print(COMPLETION_MESSAGE, file=self._stdout)
        return 0

    def execute(self, args: Sequence[str]) -> None:
        """Execute one tokenised command.

        Raises:
            DomainError: If the command is unknown, malformed or fails
        """
        command = COMMAND_ALIASES.get(args[0], args[0])
        handler = getattr(self, f"_handle_{command}", None)
        if handler is None:
            raise UnknownCommandError(args[0])
        handler(args[1:])

    def _expect(self, command: str, args: Sequence[str], *counts: int) -> None:
        if len(args) not in counts:
            expected = " or ".join(str(count) for count in counts)
            raise ArgumentCountError(command, expected, len(args))

    def _handle_load(self, args: Sequence[str]) -> None:
        self._expect("load", args, 0, 1)
        self._service.load(args[0] if args else self._default_data_file)

    def _handle_save(self, args: Sequence[str]) -> None:
        self._expect("save", args, 0, 1)
        self._service.save(args[0] if args else self._default_data_file)

    def _handle_clean(self, args: Sequence[str]) -> None:
        self._expect("clean", args, 0)
        self._service.clean()

    def _handle_add(self, args: Sequence[str]) -> None:
        self._expect("add", args, 5)
        self._service.add_book(parse_book_fields(*args))

    def _handle_remove(self, args: Sequence[str]) -> None:
        self._expect("remove", args, 1)
        self._service.remove_book(parse_index(args[0]))

    def _handle_update(self, args: Sequence[str]) -> None:
        self._expect("update", args, 6)
        index = parse_index(args[0])
        self._service.update_book(index, parse_book_fields(*args[1:]))

    def _handle_view(self, args: Sequence[str]) -> None:
        self._expect("view", args, 0)
        books = self._service.list_books()
        for index, book in books:
            print(f"[{index}] {book.describe()}", file=self._stdout)
        print(f"elements in collection: {len(books)}", file=self._stdout)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bookshelf",
        description=(
            "Manage a book collection with commands read from standard input: "
            "load, save, clean, add, remove, update, view."
        ),
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--data-file",
        default=settings.default_data_file,
        help="File used by load/save when no filename is given",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = create_parser().parse_args(argv)

    config = settings
    if args.log_level:
        config = settings.model_copy(update={"log_level": args.log_level})
    setup_logging(config)

    collection = ItemCollection(BookFactory(), atomic_save=settings.atomic_save)
    service = BookCollectionService(collection)
    interpreter = CommandInterpreter(service, default_data_file=args.data_file)

    return interpreter.run(sys.stdin)
