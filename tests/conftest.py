import re
import pytest
from vocabforge.utils.logging import console, set_quiet

@pytest.fixture(autouse=True)
def quiet_console():
    set_quiet(True)
    yield
    set_quiet(False)

@pytest.fixture
def warnings_from():
    """Run fn with the console on and return (result, lines printed by `warn`)."""
    def run(fn, *args, **kwargs):
        set_quiet(False)
        try:
            with console.capture() as cap:
                out = fn(*args, **kwargs)
        finally:
            set_quiet(True)
        text = re.sub(r"\x1b\[[0-9;]*m", "", cap.get())
        return out, [line for line in text.splitlines() if line.startswith("!")]
    return run

@pytest.fixture
def toy_counts():
    # classic low/lower/newest/widest example, symbols already seeded
    return {"l o w": 5, "l o w e r": 2, "n e w e s t": 6, "w i d e s t": 3}
