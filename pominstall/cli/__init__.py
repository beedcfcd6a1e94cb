"""pominstall CLI — Typer-based command-line interface.

Provides the ``pominstall`` command with ``install-multiple`` to install a
directory of artifacts and ``plan`` to preview what would be installed.

All output uses Rich for formatted terminal display.
"""
