"""Console logging and step progress for round planning runs."""
import logging
from typing import Optional, Sequence, TextIO

from tqdm import tqdm

class Colors:
    """ANSI color codes for prettier output."""
    CYAN = '\033[36m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    RED = '\033[31m'
    BLUE = '\033[34m'
    GRAY = '\033[37m'
    BOLD = '\033[1m'
    RESET = '\033[0m'

class Symbols:
    """Unicode symbols for status indicators."""
    CHECK = '✓'
    CROSS = '✗'
    WARN = '⚠️'
    ROCKET = '🚀'
    PIN = '📍'
    BALLOT = '🗳️'

LEVEL_COLORS = {
    logging.DEBUG: Colors.GRAY,
    logging.INFO: Colors.CYAN,
    logging.WARNING: Colors.YELLOW,
    logging.ERROR: Colors.RED,
    logging.CRITICAL: Colors.RED + Colors.BOLD,
}

class SimpleFormatter(logging.Formatter):
    """Colors the bare message by level; tracebacks follow on the next lines."""
    def format(self, record):
        color = LEVEL_COLORS.get(record.levelno, Colors.RESET)
        text = record.getMessage()
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return f"{color}{text}{Colors.RESET}"

def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Handler:
    """Route every logger through one colored console handler.

    DEBUG output (split details, skipped records) only shows with ``verbose``.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler(stream)
    console.setFormatter(SimpleFormatter())
    root.addHandler(console)
    return console

class ProgressTracker:
    """tqdm bar over the named pipeline steps.

    The bar's postfix names the step being worked on. Used as a context
    manager, the bar is closed even when a step aborts the run; only a run
    that reached ``close`` reports completion.
    """
    STATUS_PREFIXES = {
        'success': f"{Colors.GREEN}{Symbols.CHECK}",
        'warning': f"{Colors.YELLOW}{Symbols.WARN}",
        'error': f"{Colors.RED}{Symbols.CROSS}",
        'info': f"{Colors.CYAN}{Symbols.PIN}",
    }

    def __init__(self, steps: Sequence[str]):
        self.steps = list(steps)
        self.current = 0
        self.finished = False
        self.pbar = tqdm(
            total=len(self.steps),
            desc=f"{Colors.BLUE}{Symbols.BALLOT} Round Planning{Colors.RESET}",
            bar_format="{desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt}{postfix}"
        )
        self._show_step()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self.finished:
            self.pbar.close()
        return False

    @property
    def step(self) -> Optional[str]:
        """Name of the step in progress, None once all steps are done."""
        return self.steps[self.current] if self.current < len(self.steps) else None

    def _show_step(self):
        self.pbar.set_postfix_str(self.step or '')

    def advance(self, message=None, status='success'):
        """Mark the current step done, optionally writing a status line above the bar."""
        if message:
            prefix = self.STATUS_PREFIXES.get(status, '')
            self.pbar.write(f"{prefix} {message}{Colors.RESET}")
        self.current += 1
        self.pbar.update(1)
        self._show_step()

    def close(self):
        """Report completion and release the bar."""
        self.finished = True
        self.pbar.write(f"\n{Colors.GREEN}{Symbols.ROCKET} Round planning completed!{Colors.RESET}\n")
        self.pbar.close()
