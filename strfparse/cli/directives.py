"""CLI command listing the supported format directives."""

from strfparse.cli.utils import flags, output, overrides
from strfparse.core.directives import DIRECTIVE_INFO
from strfparse.models.result import DirectiveInfo


@overrides.command("directives")
@flags.output_format()
def directives(fmt: str) -> None:
    """List the format directives understood by the parser."""
    items = [
        DirectiveInfo(token=directive.value, meaning=info.meaning, range=info.range)
        for directive, info in DIRECTIVE_INFO.items()
    ]
    output.display_list(DirectiveInfo, items, output.OutputFormat(fmt.lower()))
