from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from cloud_assembly.core import (
    AssemblyError,
    bind,
    clear_bindings,
    configure_logging,
    get_logger,
    load_settings,
)
from cloud_assembly.session import Assembly
from cloud_assembly.store import FileSystemStore
from cloud_assembly_contracts import (
    BUILD_FILE,
    MANIFEST_FILE,
    ManifestValidationError,
    get_contract_version_info,
    validate_build_dict,
    validate_manifest_dict,
)
from rich.console import Console
from rich.table import Table

console = Console()


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cloud-assembly")
    sub = p.add_subparsers(dest="cmd", required=True)

    ls = sub.add_parser("ls", help="List artifacts and build steps of an assembly")
    ls.add_argument("outdir", type=Path, help="Assembly directory")

    val = sub.add_parser(
        "validate", help="Validate manifest.json and build.json of an assembly"
    )
    val.add_argument("outdir", type=Path, help="Assembly directory")

    sub.add_parser("version", help="Show contract schema version info")
    return p


def _open(outdir: Path) -> Assembly:
    return Assembly(FileSystemStore(outdir))


def dangling_dependencies(manifest: dict[str, Any]) -> list[str]:
    """
    Return `artifact -> dependency` pairs naming artifacts absent from the manifest.
    """
    artifacts = manifest.get("artifacts") or {}
    out: list[str] = []
    for aid, rec in artifacts.items():
        for dep in rec.get("dependencies") or []:
            if dep not in artifacts:
                out.append(f"{aid} -> {dep}")
    return out


def cmd_ls(outdir: Path) -> int:
    asm = _open(outdir)
    manifest = asm.read_json(MANIFEST_FILE)

    tbl = Table(title=f"Artifacts ({manifest.get('version')})", show_header=True)
    tbl.add_column("id")
    tbl.add_column("type")
    tbl.add_column("environment")
    tbl.add_column("dependencies")
    for aid, rec in (manifest.get("artifacts") or {}).items():
        tbl.add_row(
            aid,
            str(rec.get("type")),
            str(rec.get("environment")),
            ", ".join(rec.get("dependencies") or []),
        )
    console.print(tbl)

    if asm.exists(BUILD_FILE):
        steps = asm.read_json(BUILD_FILE).get("steps") or {}
        st = Table(title="Build steps", show_header=True)
        st.add_column("id")
        st.add_column("type")
        for sid, step in steps.items():
            st.add_row(sid, str(step.get("type")))
        console.print(st)
    return 0


def cmd_validate(outdir: Path) -> int:
    log = get_logger("cloud_assembly.cli")
    asm = _open(outdir)

    problems: list[str] = []
    manifest = asm.read_json(MANIFEST_FILE)
    try:
        validate_manifest_dict(manifest)
    except ManifestValidationError as e:
        problems.append(str(e))
    else:
        problems.extend(
            f"unknown dependency: {d}" for d in dangling_dependencies(manifest)
        )

    if asm.exists(BUILD_FILE):
        try:
            validate_build_dict(asm.read_json(BUILD_FILE))
        except ManifestValidationError as e:
            problems.append(str(e))

    if problems:
        for msg in problems:
            console.print(msg, style="red", markup=False)
        log.error("Assembly invalid", outdir=str(outdir), problems=len(problems))
        return 1

    console.print(f"[green]ok[/green] {outdir}")
    return 0


def cmd_version() -> int:
    info = get_contract_version_info()
    tbl = Table(title="Contracts", show_header=False, box=None)
    tbl.add_row("schema_version", info.schema_version)
    tbl.add_row("dist_version", info.dist_version)
    tbl.add_row("fingerprint", info.fingerprint)
    console.print(tbl)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    s = load_settings()
    configure_logging(level=s.log_level, fmt=s.log_format)
    bind(command=args.cmd)

    try:
        if args.cmd == "ls":
            return cmd_ls(args.outdir)
        if args.cmd == "validate":
            return cmd_validate(args.outdir)
        return cmd_version()
    except AssemblyError as e:
        console.print(f"{type(e).__name__}: {e}", style="red", markup=False)
        return 2
    finally:
        clear_bindings()


if __name__ == "__main__":
    raise SystemExit(main())
