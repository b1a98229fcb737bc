from dataclasses import dataclass, fields


@dataclass(frozen=True)
class ZipConfig:
    """Options for the ready-made Zipper adapters."""

    check_sorted: bool = False  # validate both inputs before zipping
    strict: bool = True  # raise on unsorted input, otherwise only warn

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, bool):
                raise TypeError(
                    f"ZipConfig.{field.name} must be a bool, got {type(value).__name__}"
                )

    @classmethod
    def default(cls) -> "ZipConfig":
        """Trust the caller: no sortedness checks."""
        return cls()

    @classmethod
    def checked(cls, strict: bool = True) -> "ZipConfig":
        return cls(check_sorted=True, strict=strict)
