import io
import json

import pytest

from dijkstrax import RecordingLogger, StdLogger


def test_text_lines_respect_level():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden", a=1)
    log.info("run", n=3, variant="heap")
    log.warning("careful")
    assert buf.getvalue().splitlines() == ["info run n=3 variant=heap", "warning careful"]


def test_json_lines_replace_infinity():
    buf = io.StringIO()
    log = StdLogger(level="debug", json_fmt=True, stream=buf)
    log.debug("relax", vertex=2, old=float("inf"), new=4.0)
    assert json.loads(buf.getvalue()) == {"level": "debug", "event": "relax", "vertex": 2, "old": None, "new": 4.0}


def test_unknown_level():
    with pytest.raises(ValueError):
        StdLogger(level="trace")


def test_recording_logger():
    log = RecordingLogger()
    log.info("a", x=1)
    log.debug("b")
    log.info("a", x=2)
    assert log.events("a") == [{"x": 1}, {"x": 2}]
    assert [r[0] for r in log.records] == ["info", "debug", "info"]
