"""Writers module - Log output destinations"""

from nanologger.writers.base_output import LogOutput
from nanologger.writers.console_writer import TermOutput
from nanologger.writers.stream_writer import WriterOutput
from nanologger.writers.capture_writer import TestOutput

__all__ = ["LogOutput", "TermOutput", "WriterOutput", "TestOutput"]
