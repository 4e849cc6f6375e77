"""
Tick-based progress bar used while generating items.
"""

from tqdm import tqdm


class ProgressBar:
    """
    Progress indicator with a fixed total.

    ``ticks`` counts completed items and never exceeds ``total``; surplus
    ticks are ignored so a misbehaving backend cannot push the bar past 100%.

    Args:
        message: Label shown in front of the bar.
        total: Number of items expected.
        enabled: Render the bar to the terminal. Ticks are counted either way.
    """

    def __init__(self, message: str, total: int, enabled: bool = True):
        self.message = message
        self.total = max(total, 0)
        self.ticks = 0
        self._bar = tqdm(total=self.total, desc=message, unit="item", disable=not enabled)

    def tick(self, increment: int = 1) -> None:
        step = min(increment, self.total - self.ticks)
        if step <= 0:
            return
        self.ticks += step
        self._bar.update(step)

    def finish(self) -> None:
        self._bar.close()


def make_progress_bar(message: str, total: int, enabled: bool = True) -> ProgressBar:
    """
    Create a progress bar for a generation loop.

    Args:
        message: Label such as "Generating orders".
        total: Number of items expected.
        enabled: Whether to draw the bar.

    Returns:
        ProgressBar: Bar with zero ticks.
    """
    return ProgressBar(message, total, enabled=enabled)
