import sys
import logging
import io
import datetime
import pathlib
import pytest
if sys.version_info < (3, 8):
    pytest.exit("Python >= 3.8 is required to run tests. Current version: {}".format(sys.version.replace("\n", " ")))


LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture the deltri logger family for each test into an in-memory buffer
    and write it to a file only when the test fails.
    """
    log = logging.getLogger('deltri')
    prev_handlers = list(log.handlers)
    for h in prev_handlers:
        log.removeHandler(h)

    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    log.addHandler(handler)
    prev_level = log.level
    log.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        log.removeHandler(handler)
        log.setLevel(prev_level)
        for h in prev_handlers:
            log.addHandler(h)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            LOG_DIR.mkdir(exist_ok=True)
            fname = LOG_DIR / ("{}__{}.log".format(nodeid, ts))
            try:
                with open(fname, "w", encoding="utf-8") as f:
                    f.write("=== Test: {}\n".format(request.node.nodeid))
                    f.write("=== Timestamp: {}\n\n".format(ts))
                    f.write(buf.getvalue())
            except OSError:
                # never fail teardown on a log write
                pass
