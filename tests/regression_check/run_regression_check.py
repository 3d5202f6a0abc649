#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any


REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from basestr import Configuration, load_stub_file  # noqa: E402
from basestr.cli import check_module  # noqa: E402


MANIFEST_PATH = Path(__file__).resolve().parent / "manifest.json"


def load_manifest(manifest_path: Path = MANIFEST_PATH) -> list[dict[str, Any]]:
    data = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert isinstance(data, list), "manifest must be a list"
    return data


def run_case(case: dict[str, Any], root: Path) -> tuple[bool, str]:
    file_path = (root / case["file"]).resolve()
    expect: dict[str, str] = case["expect"]
    config = Configuration.from_options(case.get("options"))

    module = load_stub_file(file_path)
    verdicts = check_module(module, config, tuple(expect))
    mismatches = [
        f"{name}: expected {wanted}, got {verdicts[name].name.lower()}"
        for name, wanted in expect.items()
        if verdicts[name].name.lower() != wanted
    ]
    if len(mismatches) == 0:
        return True, ""
    return False, "; ".join(mismatches)


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--manifest", default=str(MANIFEST_PATH))
    parser.add_argument("cases", nargs="*")
    args = parser.parse_args()

    manifest_path = Path(args.manifest).resolve()
    data = load_manifest(manifest_path)

    requested = set(args.cases)
    selected = [case for case in data if len(requested) == 0 or case["name"] in requested]
    if len(requested) > 0:
        missing = sorted(requested - set(c["name"] for c in selected))
        assert len(missing) == 0, f"unknown case names: {missing}"

    failures: list[tuple[str, str]] = []
    root = manifest_path.parent
    for case in selected:
        name = case["name"]
        ok, detail = run_case(case, root)
        print(f"{name}: {'ok' if ok else 'fail'}")
        if not ok:
            failures.append((name, detail))

    if len(failures) == 0:
        print(f"all regression cases passed ({len(selected)} cases)")
        return 0

    print(f"{len(failures)} regression case(s) failed")
    for name, detail in failures:
        print(f"- {name}: {detail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
