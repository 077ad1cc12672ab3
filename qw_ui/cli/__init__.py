from qw_ui.cli.main import app, main

__all__ = ["app", "main"]
