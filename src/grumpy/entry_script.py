"""Create an executable entry script in a cargo project and declare its crates.

Where the script goes depends on the project layout:

* library projects (``src/lib.rs`` exists) get ``src/bin/<script_name>.rs``;
  an existing file there is never replaced.
* binary projects get ``src/main.rs``; an existing one is replaced only when
  ``overwrite`` is set.

After the script is written, ``cargo add`` is run from the project root for
every crate the template relies on.
"""

import os
import sys
from pathlib import Path
from typing import Tuple

from grumpy.cargo_command import Cargo
from grumpy.exit_codes import ExitCode
from grumpy.project_paths import (
    BIN_DIR,
    BINARY_ENTRY,
    ProjectTopology,
    detect_topology,
    resolve_project_path,
    source_root,
)
from grumpy.template_loader import load_template
from grumpy.working_directory import ChangeWorkingDirectory

SOURCE_EXTENSION = ".rs"

DEPENDENCIES: Tuple[Tuple[str, str], ...] = (
    ("fehler", "1.0"),
    ("anyhow", "1.0"),
    ("thiserror", "1.0"),
    ("log", "0.4"),
    ("log4rs", "0.8"),
)


def create_entry_script(
    project_name: str,
    script_name: str,
    overwrite: bool,
    cargo: Cargo,
) -> int:
    """Write the entry-script template into the project and add its crates.

    Args:
        project_name: Project directory, relative to the current directory
            (``"."`` for the current directory itself).
        script_name: Name of the new script; only used for library projects.
        overwrite: Replace an existing ``src/main.rs`` in binary projects.
        cargo: Runs ``cargo add`` with the configured executable.

    Returns:
        ExitCode.SUCCESS, ExitCode.BINARY_EXISTS or ExitCode.ALREADY_EXISTS.
    """
    project_root = resolve_project_path(project_name)
    src_root = source_root(project_root)

    if detect_topology(src_root) is ProjectTopology.LIBRARY:
        bin_dir = src_root / BIN_DIR
        os.makedirs(bin_dir, exist_ok=True)

        filename = bin_dir / script_name
        if filename.exists():
            print(f"Not creating {filename}, file already exists", file=sys.stderr)
            return ExitCode.ALREADY_EXISTS
    else:
        filename = src_root / BINARY_ENTRY
        if filename.exists():
            if not overwrite:
                print(
                    f"Not overwriting {filename} in existing project, exiting",
                    file=sys.stderr,
                )
                return ExitCode.BINARY_EXISTS
            os.remove(filename)

    # Checked again after the suffix change: bin/foo may be free while bin/foo.rs is not.
    filename = with_source_extension(filename)
    if filename.exists():
        print(f"Not creating {filename}, already exists", file=sys.stderr)
        return ExitCode.ALREADY_EXISTS

    with open(filename, "w", encoding="utf-8") as script:
        script.write(load_template())

    with ChangeWorkingDirectory(project_root):
        add_dependencies(cargo)

    return ExitCode.SUCCESS


def add_dependencies(cargo: Cargo, dependencies=DEPENDENCIES):
    """Run ``cargo add name@version`` for each dependency, in order.

    Every dependency is attempted even if an earlier one fails; the exit
    codes are returned but not acted on.
    """
    return [cargo.run("add", f"{name}@{version}") for name, version in dependencies]


def with_source_extension(path: Path) -> Path:
    """Replace the extension of path's file name with ``.rs``.

    The stem is everything before the last dot, so ``worker.`` becomes
    ``worker.rs``. A leading dot does not start an extension: ``.hidden``
    becomes ``.hidden.rs``.
    """
    stem, dot, _ = path.name.rpartition(".")
    if not dot or not stem:
        stem = path.name
    return path.with_name(stem + SOURCE_EXTENSION)
