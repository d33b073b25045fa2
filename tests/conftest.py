import io

import pytest
from rich.console import Console


class FlushCountingIO(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


@pytest.fixture
def term_output():
    return FlushCountingIO()


@pytest.fixture
def console(term_output):
    """A truecolor console writing into an in-memory buffer."""
    return Console(
        file=term_output,
        force_terminal=True,
        color_system="truecolor",
        highlight=False,
        no_color=False,
        width=200,
    )
