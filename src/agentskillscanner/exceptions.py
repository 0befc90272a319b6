"""agentskillscanner exception hierarchy.

The scanning core never raises for missing or malformed input: absent
files, unreadable directories and broken JSON all collapse to "found
nothing". The only errors surfaced are caller mistakes at the edge, such
as an unknown filter token.
"""


class AgentSkillScannerError(Exception):
    """Base exception for all agentskillscanner errors."""


class FilterError(AgentSkillScannerError, ValueError):
    """Raised when a tool or level filter names an unknown value.

    Attributes:
        kind: Which filter was being parsed ("tool" or "level").
        token: The offending token, as given by the caller.
        choices: The tokens that would have been accepted.
    """

    def __init__(self, kind: str, token: str, choices: list[str]) -> None:
        self.kind = kind
        self.token = token
        self.choices = choices
        super().__init__(
            f"unknown {kind} {token!r} (expected one of: {', '.join(choices)})"
        )
