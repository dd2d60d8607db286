"""Rendering of new ``### Tag`` sections for readme files."""

from __future__ import annotations

from typing import Any

import yaml

from readme_editor.constants import TAG_MARKER


class IndentedListDumper(yaml.SafeDumper):
    """Safe dumper that indents block sequences under their parent key.

    PyYAML writes ``key:\\n- item`` by default; readme files use ``key:\\n  - item``.
    """

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def dump_yaml(data: dict[str, Any]) -> str:
    """Serialize ``data`` as block YAML without hard-wrapping long scalars."""
    return yaml.dump(
        data,
        Dumper=IndentedListDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=float("inf"),
    )


def build_version_definition(definition: dict[str, Any], tag: str) -> str:
    """Render a complete tag section for ``tag`` holding ``definition``.

    Example output for ``{"input-file": ["a.json"]}`` and ``package-2024-01``::

        ### Tag: package-2024-01

        These settings apply only when `--tag=package-2024-01` is specified on the command line.

        ```yaml $(tag) == 'package-2024-01'
        input-file:
          - a.json
        ```

    The section ends with a blank line so the marker it is spliced in front of
    stays a separate heading.
    """
    return (
        f"{TAG_MARKER}: {tag}\n"
        "\n"
        f"These settings apply only when `--tag={tag}` is specified on the command line.\n"
        "\n"
        f"```yaml $(tag) == '{tag}'\n"
        f"{dump_yaml(definition)}"
        "```\n"
        "\n"
    )
