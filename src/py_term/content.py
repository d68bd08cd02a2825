"""The bundled default site image.

Used by the bootloader when no image file is given.  The layout is the
same JSON shape ``fs.seed.build_tree`` accepts, so this literal doubles
as an example image.
"""

from typing import Any

DEFAULT_IMAGE: dict[str, Any] = {
    "hostname": "pyterm",
    "username": "guest",
    "motd": "Welcome! Type 'help' to see what you can do.",
    "root": {
        "name": "",
        "type": "dir",
        "children": {
            "projects": {
                "name": "projects",
                "type": "dir",
                "children": {
                    "py-term": {
                        "name": "py-term",
                        "type": "dir",
                        "children": {
                            "README.md": {
                                "name": "README.md",
                                "type": "file",
                                "title": "py-term",
                                "content": "A tiny terminal that browses a read-only file tree.",
                                "url": "https://pypi.org/project/py-term/",
                            },
                        },
                    },
                },
            },
            "docs": {"name": "docs", "type": "dir", "children": {}},
            "about.md": {
                "name": "about.md",
                "type": "file",
                "title": "About",
                "content": "Hi, I build small tools.\nUse 'cd' and 'ls' to look around.",
            },
            "contact.md": {
                "name": "contact.md",
                "type": "file",
                "content": "Say hello at hello@example.com",
            },
        },
    },
}
