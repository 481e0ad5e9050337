"""NewCommand encapsulates the new-project workflow logic."""

import sys

from grumpy.exit_codes import ExitCode


class NewCommand:
    """Creates a cargo project and, unless library-only, its entry script."""

    def __init__(self, opts, cargo, script_creator):
        self.opts = opts
        self.cargo = cargo
        self.script_creator = script_creator

    def execute(self) -> int:
        if self.opts.bin_only and self.opts.lib_only:
            print("Must only specify one of binary-only or library-only", file=sys.stderr)
            return ExitCode.CONFLICTING_PROJECT_TYPE

        returncode = self.cargo.run("new", self.opts.project_type_flag, self.opts.project_name)
        if returncode != 0:
            return returncode

        if self.opts.lib_only:
            return ExitCode.SUCCESS

        return self.script_creator(
            self.opts.project_name,
            self.opts.effective_script_name,
            overwrite=True,
            cargo=self.cargo,
        )
