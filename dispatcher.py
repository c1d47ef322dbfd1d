"""Turns a raw command line into a library command and runs it."""

import logging
from typing import Dict, Optional, Tuple, Type

from cli_config import get_cli_config
from commands import (
    AddCommand,
    CommandType,
    ExitCommand,
    GroupCommand,
    HelpCommand,
    LibraryCommand,
    ListCommand,
    RemoveCommand,
    SearchCommand,
)
from errors import InvalidArgumentError, NullArgumentError
from library import LibraryData
from ui_helpers import print_error
from validators import TextValidator

logger = logging.getLogger(__name__)

COMMAND_REGISTRY: Dict[CommandType, Type[LibraryCommand]] = {
    CommandType.ADD: AddCommand,
    CommandType.LIST: ListCommand,
    CommandType.SEARCH: SearchCommand,
    CommandType.GROUP: GroupCommand,
    CommandType.REMOVE: RemoveCommand,
    CommandType.HELP: HelpCommand,
    CommandType.EXIT: ExitCommand,
}


def parse_command(line: Optional[str]) -> Tuple[CommandType, str]:
    """Split a line into its command type and the (stripped) remaining argument."""
    if line is None:
        raise NullArgumentError("Command line must not be None.")
    keyword, argument = TextValidator.split_first_word(line)
    if not keyword:
        raise InvalidArgumentError("No command given.")

    keyword = get_cli_config().resolve_alias(keyword)
    if keyword not in CommandType.__members__:
        raise InvalidArgumentError(f"Unknown command: '{keyword}'. Type HELP for a list of commands.")
    return CommandType[keyword], argument


def create_command(command_type: CommandType, argument_input: Optional[str]) -> LibraryCommand:
    command_class = COMMAND_REGISTRY.get(command_type)
    if command_class is None:
        raise InvalidArgumentError(f"No command registered for {command_type.name}.")
    return command_class(argument_input)


def dispatch(line: str, data: LibraryData) -> Optional[CommandType]:
    """Parse, build and execute one command line.

    Invalid input is reported to the user and None is returned; the executed
    command's type is returned otherwise. Other errors propagate.
    """
    try:
        command_type, argument = parse_command(line)
        command = create_command(command_type, argument)
    except InvalidArgumentError as e:
        logger.debug("Rejected command line %r: %s", line, e)
        print_error(str(e))
        return None

    logger.debug("Executing %r", command)
    command.execute(data)
    return command_type
