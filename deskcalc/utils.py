import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__

    @property
    def title(self) -> str:
        """DIVIDE_BY_ZERO -> Divide by zero"""
        return self.name.replace("_", " ").capitalize()
