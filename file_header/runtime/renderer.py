"""Header renderer (literal token substitution).

We keep rendering separate so:
- it can be tested independently with fixed inputs
- the wall-clock read stays outside of it
- templates stay plain strings the user can edit in their settings
"""

from __future__ import annotations

from file_header.schemas import RenderValues

ESCAPED_NEWLINE = '\\n'

# Substitution order: author, then group, then date
TOKEN_ORDER = ('author', 'group', 'date')


def expand_line_breaks(text: str) -> str:
    """Turn every literal backslash-n sequence into a real line break."""
    return text.replace(ESCAPED_NEWLINE, '\n')


class HeaderRenderer:
    """Render header templates with ${author}, ${group} and ${date} tokens."""

    def render(self, template: str, values: RenderValues) -> str:
        """Render a header template.

        Escaped newlines are expanded before any token is substituted, so a
        value containing a literal backslash-n is inserted as-is. Tokens are
        then replaced one kind at a time in TOKEN_ORDER. A pass never rescans
        its own replacements, but a later pass does see text inserted by an
        earlier one (an author value containing ${date} gets the date).

        Args:
            template: Header template with literal "\\n" line breaks and
                ${author}/${group}/${date} placeholders.
            values: Resolved token values.

        Returns:
            Rendered header text, untrimmed.
        """
        text = expand_line_breaks(template)
        tokens = values.as_tokens()
        for name in TOKEN_ORDER:
            text = text.replace('${' + name + '}', tokens[name])
        return text
