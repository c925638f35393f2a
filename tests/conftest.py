import stat
import sys
from pathlib import Path

import pytest

from artpipe.config import Settings

# Stand-in for `boxes -d c`: frames every line of argv[1] in a C comment box.
RENDERER_SOURCE = """\
import sys

lines = sys.argv[1].splitlines() or [""]
width = max(len(line) for line in lines)
print("/" + "*" * (width + 4) + "/")
for line in lines:
    print("/* " + line.ljust(width) + " */")
print("/" + "*" * (width + 4) + "/")
"""

FAILING_SOURCE = """\
import sys

sys.stdout.write("partial")
sys.stderr.write("renderer exploded")
sys.exit(3)
"""

ECHO_ARGS_SOURCE = """\
import json
import sys

sys.stdout.write(json.dumps(sys.argv[1:]))
"""

# Appends start/end markers next to itself so overlapping runs show up in order.
TRACING_SOURCE = """\
import os
import sys
import time

trace = os.path.join(os.path.dirname(os.path.abspath(sys.argv[0])), "trace.log")
with open(trace, "a", encoding="utf-8") as handle:
    handle.write("start\\n")
time.sleep(0.2)
with open(trace, "a", encoding="utf-8") as handle:
    handle.write("end\\n")
sys.stdout.write(sys.argv[1])
"""


def _write_script(path: Path, source: str) -> Path:
    path.write_text(f"#!{sys.executable}\n{source}", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def renderer(tmp_path: Path) -> Path:
    return _write_script(tmp_path / "fake-boxes", RENDERER_SOURCE)


@pytest.fixture
def failing_renderer(tmp_path: Path) -> Path:
    return _write_script(tmp_path / "broken-boxes", FAILING_SOURCE)


@pytest.fixture
def echo_args(tmp_path: Path) -> Path:
    return _write_script(tmp_path / "echo-args", ECHO_ARGS_SOURCE)


@pytest.fixture
def banner(tmp_path: Path) -> Path:
    path = tmp_path / "banner.txt"
    path.write_bytes(b"Hello\n")
    return path


@pytest.fixture
def settings(tmp_path: Path, banner: Path, renderer: Path) -> Settings:
    return Settings(
        resource_path=str(banner),
        command=str(renderer),
        log_path=str(tmp_path / "artpipe.log"),
    )


@pytest.fixture
def tracing_renderer(tmp_path: Path) -> Path:
    return _write_script(tmp_path / "tracing-boxes", TRACING_SOURCE)
