"""Load the entry-script template shipped in grumpy.templates."""

import importlib.resources

ENTRY_SCRIPT_TEMPLATE = "main.rs"


def load_template(template_name: str = ENTRY_SCRIPT_TEMPLATE, *, package: str = "grumpy") -> str:
    """Return a template's text exactly as shipped, with no substitution.

    Args:
        template_name: Template filename within the ``templates`` subpackage.
        package: Package owning the ``templates`` subpackage.
    """
    templates = importlib.resources.files(f"{package}.templates")
    return templates.joinpath(template_name).read_text(encoding="utf-8")
