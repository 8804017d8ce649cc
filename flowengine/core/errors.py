"""
Error types raised at wiring and loading time.

Runtime usage errors are logged and recovered from; only failures that
mean the game was assembled incorrectly raise.
"""


class FlowError(Exception):
    """Base class for gameplay-flow errors."""


class MissingCollaboratorError(FlowError):
    """A component was constructed without a collaborator it requires."""

    def __init__(self, owner: str, collaborator: str):
        super().__init__(f"{owner} requires a {collaborator}, got None")
        self.owner = owner
        self.collaborator = collaborator


class SceneDataError(FlowError):
    """Scene data failed validation."""


def require(owner: str, **collaborators: object) -> None:
    """
    Raise MissingCollaboratorError for the first collaborator that is None.

    Usage:
        require("ModeController", player=player, menus=menus)
    """
    for name, value in collaborators.items():
        if value is None:
            raise MissingCollaboratorError(owner, name)
