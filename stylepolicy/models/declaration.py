from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """One ``property: value`` pair as it was written in the style text.

    Both fields hold the raw source text (trimmed of surrounding whitespace),
    never a re-serialized form, so accepted declarations can be emitted
    byte for byte.
    """
    property: str
    value: str

    def to_css(self) -> str:
        return f"{self.property}: {self.value}"
