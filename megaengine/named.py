"""Base for engine objects that carry a name."""


class Named:
    def __init__(self, name: str = "") -> None:
        self.name = name