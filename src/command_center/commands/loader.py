"""
Command loader - discovers and imports the builtin slash commands.

Each command lives in its own subdirectory of ``builtins`` with an
__init__.py file and registers itself using the command_registry decorator:

    # builtins/rainbow/__init__.py
    from command_center.commands.registry import command_registry

    @command_registry.register("rainbow", "Post a rainbow video URL")
    def cmd_rainbow(options, ctx):
        ...
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Package builtins directory
PACKAGE_BUILTINS_DIR = Path(__file__).parent / "builtins"
BUILTINS_PACKAGE = "command_center.commands.builtins"


def discover_commands(commands_dir: Path) -> list[str]:
    """
    Discover command packages in the given directory.

    Args:
        commands_dir: Directory to search

    Returns:
        Sorted list of command package names.
    """
    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    names = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        if (subdir / "__init__.py").exists():
            names.append(subdir.name)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return names


def load_command(name: str, package: str = BUILTINS_PACKAGE) -> tuple[str, bool, str]:
    """
    Import a single command package.

    Returns:
        Tuple of (cmd_name, success, error_message)
    """
    try:
        importlib.import_module(f"{package}.{name}")
        return (name, True, "")
    except SyntaxError as e:
        return (name, False, f"Syntax error: {e}")
    except ImportError as e:
        return (name, False, f"Import error: {e}")
    except Exception as e:
        return (name, False, f"Error: {e}")


def load_all_commands(verbose: bool = False) -> int:
    """
    Load all builtin commands.

    Importing is idempotent: a module already imported is not re-run, so the
    registry keeps one entry per command across plugin restarts.

    Returns:
        Number of successfully loaded command packages.
    """
    total_loaded = 0

    for name in discover_commands(PACKAGE_BUILTINS_DIR):
        cmd_name, success, error = load_command(name)

        if success:
            total_loaded += 1
            if verbose:
                logger.info(f"Loaded command: {cmd_name}")
        else:
            logger.warning(f"Failed to load command '{cmd_name}': {error}")

    return total_loaded
