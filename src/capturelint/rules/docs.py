"""Markdown documentation generated from a rule's description."""

from __future__ import annotations

from capturelint.rules.base import Example, RuleDescription


def _example_block(example: Example) -> str:
    return f"```swift\n{example.code}\n```"


def render_markdown(description: RuleDescription) -> str:
    """Render one rule page: identity table, then its examples."""
    lines = [
        f"# {description.name}",
        "",
        description.description,
        "",
        f"* **Identifier:** `{description.identifier}`",
        f"* **Enabled by default:** {'No' if description.opt_in else 'Yes'}",
        f"* **Kind:** {description.kind.value}",
        "",
    ]
    if description.non_triggering_examples:
        lines += ["## Non Triggering Examples", ""]
        for example in description.non_triggering_examples:
            lines += [_example_block(example), ""]
    if description.triggering_examples:
        lines += ["## Triggering Examples", ""]
        for example in description.triggering_examples:
            lines += [_example_block(example), ""]
    return "\n".join(lines).rstrip() + "\n"
