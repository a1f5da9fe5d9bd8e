"""
Reporting helpers for CLI output and file export.

Modules
-------
formatters : ASCII formatters returning strings for ``typer.echo()``.
export     : JSON / CSV writers and assessment flattening.
"""
