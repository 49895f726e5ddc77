"""
Typer Groups

Click group customizations shared by the main app and its sub-apps.
"""

from click import Context
from typer.core import TyperGroup


class SortedCommandsGroup(TyperGroup):
    """Custom Typer group that sorts commands alphabetically within each help panel."""

    def list_commands(self, ctx: Context) -> list[str]:
        """Return commands sorted alphabetically."""
        commands = super().list_commands(ctx)
        return sorted(commands)
