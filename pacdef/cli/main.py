from __future__ import annotations

import argparse
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Tuple

from .. import __version__
from ..config import EDITOR, SHELL_ENV, group_dir
from ..core.backend import Backend, ExecMode
from ..core.errors import GroupLoadError, GroupNotFoundError, PacdefError
from ..core.group import Group, LoadResult
from ..core.package import Package
from ..core.registry import Backends
from ..core.section import add_to_section, header_for
from ..utils.fs import atomic_write, ensure_dir, read_text

Plan = List[Tuple[Backend, List[Package]]]


def confirm(prompt: str) -> bool:
    while True:
        input_str = input(f"{prompt} [y/N]: ").strip().lower()
        match input_str:
            case "y" | "yes":
                return True
            case "n" | "no" | "":
                return False
            case _:
                print("Invalid input. Please enter `y` or `n`.")


def resolve_group_dir(args: argparse.Namespace) -> Path:
    if args.groups_dir:
        return Path(args.groups_dir).expanduser()
    return group_dir()


def load_groups(args: argparse.Namespace) -> LoadResult:
    result = Group.load_from_dir(resolve_group_dir(args))
    for err in result.errors:
        print(f"warning: {err}", file=sys.stderr)
    return result


def load_backends(args: argparse.Namespace, groups: LoadResult) -> List[Backend]:
    backends = []
    exec_mode = ExecMode.parse(args.exec_mode) if args.exec_mode else None
    for backend in Backends.iter(exec_mode):
        backend.load(groups.groups)
        backends.append(backend)
    return backends


def available(backends: List[Backend]) -> List[Backend]:
    result = []
    for backend in backends:
        if backend.is_available():
            result.append(backend)
        else:
            print(
                f"warning: skipping {backend.describe()}: {backend.binary} not found",
                file=sys.stderr,
            )
    return result


def print_plan(plan: Plan) -> None:
    for backend, packages in plan:
        print()
        print(header_for(backend.section))
        for p in packages:
            print(f"  {p}")


def execute(plan: Plan, remove: bool) -> int:
    first = plan[0][0]
    if first.exec_mode is ExecMode.REPLACE and len(plan) > 1:
        print(f"note: exec mode is replace, only {first.describe()} will run", file=sys.stderr)
    for backend, packages in plan:
        if remove:
            rc = backend.remove_packages(packages)
        else:
            rc = backend.install_packages(packages)
        if rc != 0:
            print(f"error: {backend.binary} exited with status {rc}", file=sys.stderr)
            return rc
    return 0


def cmd_groups(args: argparse.Namespace) -> int:
    for group in load_groups(args).sorted():
        print(group.name)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    result = load_groups(args)
    for i, name in enumerate(args.groups):
        group = result.get(name)
        if group is None:
            raise GroupNotFoundError(name)
        if i:
            print()
        print(group.content, end="" if group.content.endswith("\n") else "\n")
    return 0


def cmd_sync(args: argparse.Namespace) -> int:
    backends = load_backends(args, load_groups(args))
    plan: Plan = []
    for backend in backends:
        if not backend.get_managed_packages():
            continue
        missing = backend.get_missing_packages_sorted()
        if missing:
            plan.append((backend, missing))

    if not plan:
        print("Nothing to do.")
        return 0

    print("Would install the following packages:")
    print_plan(plan)
    if args.dry_run:
        return 0
    print()
    if not args.noconfirm and not confirm("Continue?"):
        return 0
    return execute(plan, remove=False)


def cmd_unmanaged(args: argparse.Namespace) -> int:
    backends = available(load_backends(args, load_groups(args)))
    plan: Plan = []
    for backend in backends:
        unmanaged = backend.get_unmanaged_packages_sorted()
        if unmanaged:
            plan.append((backend, unmanaged))

    if not plan:
        print("No unmanaged packages.")
        return 0
    for i, (backend, packages) in enumerate(plan):
        if i:
            print()
        print(header_for(backend.section))
        for p in packages:
            print(p)
    return 0


def cmd_clean(args: argparse.Namespace) -> int:
    backends = available(load_backends(args, load_groups(args)))
    plan: Plan = []
    for backend in backends:
        unmanaged = backend.get_unmanaged_packages_sorted()
        if unmanaged:
            plan.append((backend, unmanaged))

    if not plan:
        print("Nothing to remove.")
        return 0

    print("Would remove the following packages:")
    print_plan(plan)
    if args.dry_run:
        return 0
    print()
    if not args.noconfirm and not confirm("Continue?"):
        return 0
    return execute(plan, remove=True)


def cmd_adopt(args: argparse.Namespace) -> int:
    directory = resolve_group_dir(args)
    path = directory / args.group
    try:
        content = read_text(path) or ""
    except (OSError, UnicodeDecodeError) as e:
        raise GroupLoadError(path, e) from e

    backends = available(load_backends(args, load_groups(args)))
    adopted: Plan = []
    for backend in backends:
        unmanaged = backend.get_unmanaged_packages_sorted()
        if not unmanaged:
            continue
        content = add_to_section(content, backend.section, unmanaged)
        adopted.append((backend, unmanaged))

    if not adopted:
        print("Nothing to adopt.")
        return 0

    print(f"Would add the following packages to group {args.group}:")
    print_plan(adopted)
    if args.dry_run:
        return 0

    ensure_dir(directory)
    # write through symlinks created by `import`
    atomic_write(path.resolve(), content.encode("utf-8"))
    for backend, packages in adopted:
        backend.add_packages(packages)
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    directory = resolve_group_dir(args)
    rc = 0
    for file in args.files:
        source = Path(file).expanduser().resolve()
        if not source.is_file():
            print(f"error: not a file: {file}", file=sys.stderr)
            rc = 1
            continue
        target = directory / source.name
        if target.exists() or target.is_symlink():
            print(f"error: group already exists: {source.name}", file=sys.stderr)
            rc = 1
            continue
        if args.dry_run:
            print(f"Would link {target} -> {source}")
            continue
        ensure_dir(directory)
        os.symlink(source, target)
    return rc


def cmd_remove(args: argparse.Namespace) -> int:
    directory = resolve_group_dir(args)
    targets = [directory / name for name in args.groups]
    for name, target in zip(args.groups, targets):
        if not (target.is_file() or target.is_symlink()):
            raise GroupNotFoundError(name)
    for target in targets:
        if args.dry_run:
            print(f"Would remove {target}")
            continue
        target.unlink()
    return 0


def cmd_edit(args: argparse.Namespace) -> int:
    directory = resolve_group_dir(args)
    paths = [directory / name for name in args.groups]
    for name, path in zip(args.groups, paths):
        if not path.is_file():
            raise GroupNotFoundError(name)
    try:
        cp = subprocess.run([EDITOR, *map(str, paths)], env=SHELL_ENV, check=False)
    except OSError as e:
        raise PacdefError(f"cannot launch editor {EDITOR}: {e}") from e
    return cp.returncode


def cmd_version(_: argparse.Namespace) -> int:
    print(f"pacdef {__version__}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pacdef", description="Declarative package management across package managers"
    )
    sub = p.add_subparsers(dest="command")
    p.add_argument(
        "--dry-run", action="store_true", help="Print what would be done without doing it"
    )
    p.add_argument("--groups-dir", help="Directory containing group files")
    p.add_argument(
        "--exec-mode",
        choices=[m.value for m in ExecMode],
        help="Run the package manager as a child (spawn) or replace this process (replace)",
    )

    sp_groups = sub.add_parser("groups", help="List groups")
    sp_groups.set_defaults(func=cmd_groups)

    sp_show = sub.add_parser("show", help="Show the content of groups")
    sp_show.add_argument("groups", nargs="+", help="Group names")
    sp_show.set_defaults(func=cmd_show)

    sp_sync = sub.add_parser("sync", help="Install packages from all groups")
    sp_sync.add_argument("--noconfirm", action="store_true", help="Do not ask for confirmation")
    sp_sync.set_defaults(func=cmd_sync)

    sp_un = sub.add_parser("unmanaged", help="Show explicitly installed packages not in any group")
    sp_un.set_defaults(func=cmd_unmanaged)

    sp_clean = sub.add_parser("clean", help="Remove unmanaged packages")
    sp_clean.add_argument("--noconfirm", action="store_true", help="Do not ask for confirmation")
    sp_clean.set_defaults(func=cmd_clean)

    sp_adopt = sub.add_parser("adopt", help="Add unmanaged packages to a group")
    sp_adopt.add_argument("group", help="Group name")
    sp_adopt.set_defaults(func=cmd_adopt)

    sp_import = sub.add_parser("import", help="Link group files into the group directory")
    sp_import.add_argument("files", nargs="+", help="Group files")
    sp_import.set_defaults(func=cmd_import)

    sp_rm = sub.add_parser("remove", help="Remove groups")
    sp_rm.add_argument("groups", nargs="+", help="Group names")
    sp_rm.set_defaults(func=cmd_remove)

    sp_edit = sub.add_parser("edit", help="Edit groups in $EDITOR")
    sp_edit.add_argument("groups", nargs="+", help="Group names")
    sp_edit.set_defaults(func=cmd_edit)

    sp_ver = sub.add_parser("version", help="Show version")
    sp_ver.set_defaults(func=cmd_version)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 2
    try:
        return int(args.func(args) or 0)
    except PacdefError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
