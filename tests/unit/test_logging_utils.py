import io
import logging
import sys

import pytest
from bureaux_rounds.utils.logging import SimpleFormatter, ProgressTracker, Colors, setup_logging

class DummyRecord(logging.LogRecord):
    def __init__(self, levelname, msg, exc_info=None):
        super().__init__(name="test", level=getattr(logging, levelname), pathname=__file__, lineno=0, msg=msg, args=(), exc_info=exc_info)

class DummyBar:
    def __init__(self):
        self.updates = []
        self.writes = []
        self.postfixes = []
        self.closed = False
    def update(self, n):
        self.updates.append(n)
    def write(self, msg):
        self.writes.append(msg)
    def set_postfix_str(self, s):
        self.postfixes.append(s)
    def close(self):
        self.closed = True

@pytest.fixture
def dummy_bar(monkeypatch):
    import bureaux_rounds.utils.logging as logging_utils
    dummy = DummyBar()
    monkeypatch.setattr(logging_utils, 'tqdm', lambda total, desc, bar_format: dummy)
    return dummy

@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_level, saved_handlers = root.level, root.handlers[:]
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)

@pytest.mark.parametrize("level, color", [
    ("DEBUG", Colors.GRAY),
    ("INFO", Colors.CYAN),
    ("WARNING", Colors.YELLOW),
    ("ERROR", Colors.RED),
    ("CRITICAL", Colors.RED + Colors.BOLD)
])
def test_simple_formatter_colors(level, color):
    out = SimpleFormatter().format(DummyRecord(level, "round built"))
    assert out == f"{color}round built{Colors.RESET}"


def test_simple_formatter_appends_traceback():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = DummyRecord("ERROR", "save failed", exc_info=sys.exc_info())
    out = SimpleFormatter().format(record)
    assert out.startswith(f"{Colors.RED}save failed\nTraceback")
    assert "RuntimeError: boom" in out


def test_setup_logging_levels(restore_root_logger):
    root = restore_root_logger
    setup_logging(verbose=True)
    assert root.level == logging.DEBUG
    setup_logging()
    assert root.level == logging.INFO
    # Handlers are replaced, not stacked
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, SimpleFormatter)


def test_setup_logging_stream(restore_root_logger):
    stream = io.StringIO()
    setup_logging(stream=stream)
    logging.getLogger("bureaux_rounds.test").info("grouped")
    logging.getLogger("bureaux_rounds.test").debug("hidden")
    assert stream.getvalue() == f"{Colors.CYAN}grouped{Colors.RESET}\n"


def test_progress_tracker_advance_and_close(dummy_bar):
    pt = ProgressTracker(['load', 'group', 'cluster'])
    assert pt.step == 'load'

    pt.advance("stations loaded", status='success')
    pt.advance()
    pt.advance("odd status", status='unknown')
    pt.close()

    assert dummy_bar.updates == [1, 1, 1]
    assert pt.current == 3
    assert pt.step is None
    assert dummy_bar.postfixes == ['load', 'group', 'cluster', '']
    assert any("stations loaded" in w for w in dummy_bar.writes)
    assert any("odd status" in w for w in dummy_bar.writes)
    assert any("completed" in w.lower() for w in dummy_bar.writes)
    assert dummy_bar.closed


def test_progress_tracker_closes_on_abort(dummy_bar):
    with pytest.raises(SystemExit):
        with ProgressTracker(['load', 'save']) as pt:
            pt.advance()
            raise SystemExit(2)
    assert dummy_bar.closed
    assert not any("completed" in w.lower() for w in dummy_bar.writes)
