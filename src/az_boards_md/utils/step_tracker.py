"""Step tracker for displaying progress during multi-step operations."""

from rich.markup import escape

from az_boards_md.utils.console import get_console, get_error_console


class StepTracker:
    """Track and display progress through multiple steps.

    Example:
        >>> tracker = StepTracker(2)
        >>> tracker.start_step("Creating work item")
        >>> # ... do work ...
        >>> tracker.complete_step("Created work item 42")
        >>> tracker.start_step("Updating markdown fields")
        >>> # ... do work ...
        >>> tracker.complete_step("Updated markdown fields: Description")
    """

    def __init__(self, total_steps: int):
        """Initialize step tracker.

        Args:
            total_steps: Total number of steps to track
        """
        self.total_steps = total_steps
        self.current_step = 0
        self.console = get_console()
        self._current_message: str | None = None

    @property
    def prefix(self) -> str:
        return f"[{self.current_step}/{self.total_steps}]"

    def start_step(self, message: str) -> None:
        """Start a new step.

        Args:
            message: Description of the step being started
        """
        self.current_step += 1
        self._current_message = message
        self.console.print(f"[cyan bold]{escape(self.prefix)}[/cyan bold] {escape(message)}...")

    def complete_step(self, message: str | None = None) -> None:
        """Mark current step as complete.

        Args:
            message: Optional completion message (uses start message if not provided)
        """
        if message is None:
            message = self._current_message or "Done"
        self.console.print(
            f"[green]✅[/green] [cyan bold]{escape(self.prefix)}[/cyan bold] {escape(message)}"
        )

    def fail_step(self, message: str | None = None, error: str | None = None) -> None:
        """Mark current step as failed.

        Failures go to stderr next to the error report.

        Args:
            message: Optional failure message
            error: Optional error details
        """
        if message is None:
            message = self._current_message or "Failed"
        error_console = get_error_console()
        error_console.print(
            f"[red]✗[/red] [cyan bold]{escape(self.prefix)}[/cyan bold] {escape(message)}"
        )
        if error:
            error_console.print(f"  [red]{escape(error)}[/red]")
