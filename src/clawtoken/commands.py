"""
Named commands exposed to the host shell.

The host invokes commands by name and receives a CommandResult, never an
exception, for any expected failure. Unexpected exceptions still propagate so
the host can report them as bugs.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from .config.reader import TokenReader
from .config.settings import BridgeSettings, apply_logging, load_settings
from .errors import TokenReadError
from .models.result import CommandResult


logger = logging.getLogger(__name__)


def configure(settings_path: Optional[Union[str, Path]] = None) -> BridgeSettings:
    """
    Load bridge settings and apply them to the package logger.

    The host calls this once at startup, before invoking any command.

    Args:
        settings_path: YAML settings file, or None for defaults

    Returns:
        The applied settings

    Raises:
        SettingsError: If the settings file is invalid
    """
    settings = load_settings(settings_path)
    apply_logging(settings)
    return settings


def read_openclaw_token(reader: Optional[TokenReader] = None) -> CommandResult:
    """
    Read the OpenClaw gateway token.

    Args:
        reader: Token reader to use. Defaults to one over the real filesystem.

    Returns:
        CommandResult holding the token, or the error message and kind
    """
    reader = reader if reader is not None else TokenReader()
    try:
        return CommandResult.success(reader.read_token())
    except TokenReadError as e:
        return CommandResult.failure(str(e), e.kind)


COMMANDS: Dict[str, Callable[[], CommandResult]] = {
    'read_openclaw_token': read_openclaw_token,
}


def invoke(name: str) -> CommandResult:
    """
    Run a registered command by name.

    Args:
        name: Command name, e.g. 'read_openclaw_token'

    Returns:
        The command's result, or a failure for an unknown command
    """
    command = COMMANDS.get(name)
    if command is None:
        logger.warning(f"Unknown command requested: {name}")
        return CommandResult.failure(f"unknown command: {name}", "UnknownCommand")

    logger.debug(f"Invoking command {name}")
    return command()
