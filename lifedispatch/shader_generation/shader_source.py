from typing import Optional

class ShaderSource:
    """
    Fully resolved shader source, ready to be handed to whatever creates
    shader modules on the device.

    Attributes:
        name (`str`): The template the source was built from, relative to the asset root.
        source (`str`): The resolved wgsl source.
        label (`Optional[str]`): A label for the shader module.
    """
    name: str
    source: str
    label: Optional[str]

    def __init__(self, name: str, source: str, label: Optional[str] = None) -> None:
        self.name = name
        self.source = source
        self.label = label

    def __str__(self) -> str:
        return self.source

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShaderSource):
            return NotImplemented

        return self.name == other.name and self.source == other.source and self.label == other.label

    def __hash__(self) -> int:
        return hash((self.name, self.source, self.label))

    def __repr__(self) -> str:
        result = ""

        for ii, line in enumerate(self.source.split("\n")):
            result += f"{ii + 1:4d}: {line}\n"

        return result
