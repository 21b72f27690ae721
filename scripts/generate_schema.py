from __future__ import annotations

import argparse
import json
from pathlib import Path

from sortjson.schema import config_json_schema

_DEFAULT_OUTPUT = Path("schema.json")


def render_schema() -> str:
    return json.dumps(config_json_schema(), indent=2) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Write the JSON schema of the sort-json configuration file."
    )
    parser.add_argument("--output", type=Path, default=_DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    output: Path = args.output
    output.write_text(render_schema(), encoding="utf-8")
    print(f"Generated: {output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
