"""Bootloader — load the site image and start a shell.

Before the first prompt appears the terminal has to know what it is
showing: which file tree, which user and host names for the prompt,
and what greeting to print.  All of that comes from a *site image*, a
JSON document shaped like ``content.DEFAULT_IMAGE``.

The boot chain is short:

1. **Load** — read the image file, or fall back to the bundled default.
2. **Build** — turn the image's ``root`` into a validated ``PathTree``.
3. **Shell** — wire a ``Navigator``, ``HistoryCursor``, and ``Logger``
   into a ``Shell``.

Each step appends a line to the boot log, which the REPL and web UI
show as a banner.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from py_term.content import DEFAULT_IMAGE
from py_term.fs.nodes import Directory
from py_term.fs.seed import TreeError, build_tree
from py_term.fs.tree import PathTree
from py_term.logging import Logger, LogLevel
from py_term.navigator import Navigator
from py_term.shell import Shell

if TYPE_CHECKING:
    from pathlib import Path


class BootStage(StrEnum):
    """Represent the current phase of the boot chain."""

    LOAD = "load"
    BUILD = "build"
    SHELL = "shell"
    READY = "ready"


@dataclass(frozen=True)
class SiteImage:
    """Everything the terminal needs to start.

    Attributes:
        hostname: Host name shown in the prompt.
        username: User name shown in the prompt.
        motd: Greeting printed after boot.
        root: The root directory of the file tree.

    """

    hostname: str
    username: str
    motd: str
    root: Directory


class BootError(RuntimeError):
    """Raise when the boot chain cannot continue.

    Examples: missing image file, invalid JSON, malformed tree.
    """


def parse_image(data: dict[str, Any]) -> SiteImage:
    """Build a ``SiteImage`` from plain data.

    Raises:
        TreeError: If ``root`` is missing or not a well-formed tree.

    """
    if "root" not in data:
        msg = "image has no 'root' entry"
        raise TreeError(msg)
    return SiteImage(
        hostname=str(data.get("hostname", DEFAULT_IMAGE["hostname"])),
        username=str(data.get("username", DEFAULT_IMAGE["username"])),
        motd=str(data.get("motd", "")),
        root=build_tree(data["root"]),
    )


class Bootloader:
    """Load a site image and produce a ready shell.

    Usage::

        bootloader = Bootloader()
        shell = bootloader.boot()

    """

    def __init__(self, *, image_path: Path | None = None) -> None:
        """Create a bootloader.

        Args:
            image_path: Path to a JSON site image.  If None, the bundled
                default image is used.

        """
        self._image_path = image_path
        self._stage: BootStage = BootStage.LOAD
        self._boot_log: list[str] = []
        self._image: SiteImage | None = None

    @property
    def stage(self) -> BootStage:
        """Return the current boot stage."""
        return self._stage

    @property
    def boot_log(self) -> list[str]:
        """Return the accumulated boot log messages."""
        return list(self._boot_log)

    @property
    def image(self) -> SiteImage | None:
        """Return the loaded image, or None before ``boot``."""
        return self._image

    def boot(self) -> Shell:
        """Run the boot chain and return a ready shell.

        Raises:
            BootError: If the image cannot be read or is malformed.

        """
        self._stage = BootStage.LOAD
        data = self._read_image()
        source = str(self._image_path) if self._image_path is not None else "built-in"
        self._boot_log.append(f"[BOOT] Loading site image ({source}) ... OK")

        self._stage = BootStage.BUILD
        try:
            image = parse_image(data)
        except TreeError as e:
            msg = f"Invalid site image: {e}"
            raise BootError(msg) from e
        except RecursionError as e:
            msg = "Invalid site image: file tree is nested too deeply"
            raise BootError(msg) from e
        self._image = image
        self._boot_log.append(f"[BOOT] File tree: {len(image.root.children)} top-level entries ... OK")

        self._stage = BootStage.SHELL
        logger = Logger()
        for message in self._boot_log:
            logger.log(LogLevel.INFO, message, source="boot")
        shell = Shell(
            navigator=Navigator(PathTree(image.root)),
            logger=logger,
            username=image.username,
            hostname=image.hostname,
        )
        self._boot_log.append(f"[OK] Shell ready for {image.username}@{image.hostname}")

        self._stage = BootStage.READY
        return shell

    def _read_image(self) -> dict[str, Any]:
        """Read the image file, or return the bundled default.

        Raises:
            BootError: If the file is specified but cannot be read.

        """
        if self._image_path is None:
            return DEFAULT_IMAGE
        try:
            data = json.loads(self._image_path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            msg = f"Cannot load site image: {e}"
            raise BootError(msg) from e
        except RecursionError as e:
            msg = "Cannot load site image: JSON is nested too deeply"
            raise BootError(msg) from e
        if not isinstance(data, dict):
            msg = "Cannot load site image: top level must be a JSON object"
            raise BootError(msg)
        return data
