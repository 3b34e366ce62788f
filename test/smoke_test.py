"""Smoke test for the ElasticBuilder CLI.

Run:
  python test/smoke_test.py

Validates that the CLI can render a recipe with the built-in defaults and that
the output on stdout is a parseable request body.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from click.testing import CliRunner


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
sys.path.insert(0, str(SRC_DIR))


def main() -> int:
    from ElasticBuilder.cli import cli

    runner = CliRunner()
    result = runner.invoke(cli, ["recipe", "filter", "status", "active"], catch_exceptions=False)

    output = result.output
    assert result.exit_code == 0, output
    assert '"filter"' in output, output
    start = output.index("{")
    end = output.rindex("}") + 1
    body = json.loads(output[start:end])
    assert body == {"query": {"bool": {"filter": {"term": {"status": "active"}}}}}, body
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
