"""Test output captured by the test runner"""

from nanologger.core.log_entry import LogEntry
from nanologger.writers.base_output import LogOutput


class TestOutput(LogOutput):
    """
    Write logs through print().

    Output lands in whatever sys.stdout is at call time, so pytest's
    capsys/capfd fixtures capture it per test.
    """

    # not a test class despite the name
    __test__ = False

    def write(self, entry: LogEntry):
        """Print log entry."""
        print(self.formatter.format(entry, use_color=False), end="", flush=True)
