class UnsupportedFormatError(ValueError):
    """Raised when a date string matches none of the supported shapes."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"unsupported date format: {value!r}")
