"""Base class for water distribution system optimisation problems."""


class WDSProblem:
    """Holds the name and the descriptive text of a problem."""

    def __init__(self, name: str = "", extra_info: str = "") -> None:
        self._name = name
        self._extra_info = extra_info

    def get_name(self) -> str:
        """Return the name of the problem."""
        return self._name

    def get_extra_info(self) -> str:
        """Return extra information about the problem."""
        return self._extra_info