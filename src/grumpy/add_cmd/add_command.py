"""AddCommand encapsulates adding an entry script to an existing project."""

import os
import sys
from pathlib import Path

from grumpy.exit_codes import ExitCode
from grumpy.project_paths import looks_like_project_root


class AddCommand:
    """Adds an entry script to the current project or to a named one."""

    def __init__(self, opts, cargo, script_creator):
        self.opts = opts
        self.cargo = cargo
        self.script_creator = script_creator

    def execute(self) -> int:
        if looks_like_project_root(Path(os.getcwd())):
            if self.opts.project_name is not None:
                print(
                    "Specified a project name but appear to be inside a project already",
                    file=sys.stderr,
                )
                return ExitCode.INSIDE_PROJECT
        elif self.opts.project_name is None:
            print("No project name specified", file=sys.stderr)
            return ExitCode.NO_PROJECT_NAME

        return self.script_creator(
            self.opts.effective_project_name,
            self.opts.script_name,
            overwrite=False,
            cargo=self.cargo,
        )
