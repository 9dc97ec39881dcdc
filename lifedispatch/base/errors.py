from typing import List
from typing import Optional

class ShaderAssemblyError(RuntimeError):
    """
    Base class of every error raised while assembling shader source. Callers
    that only want to know whether a shader could be built catch this one.
    """

class MissingTemplateError(ShaderAssemblyError):
    """
    Raised when the root template file can not be read.

    Attributes:
        path (`str`): The full path that was read.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to read shader file: {path}")
        self.path = path

class MissingImportError(ShaderAssemblyError):
    """
    Raised when a file named by an `#import` directive can not be read.

    Attributes:
        importer (`str`): The template (relative to the asset root) holding the directive.
        target (`str`): The import target as written in the directive.
        path (`str`): The full path that was read.
    """

    def __init__(self, importer: str, target: str, path: str) -> None:
        super().__init__(f"Failed to read import file: {target} (imported by {importer}, looked in {path})")
        self.importer = importer
        self.target = target
        self.path = path

class DuplicateImportPathError(ShaderAssemblyError):
    """
    Raised when one file declares `#define_import_path` more than once.
    """

    def __init__(self, first: str, second: str, file_name: Optional[str] = None) -> None:
        location = f" in {file_name}" if file_name is not None else ""
        super().__init__(f"Import path declared twice{location}: '{first}' and '{second}'")
        self.first = first
        self.second = second
        self.file_name = file_name

class ImportCycleError(ShaderAssemblyError):
    """
    Raised when a file ends up importing itself.

    Attributes:
        chain (`List[str]`): The files of the cycle in import order, the first
            and the last entry are the same file.
    """

    def __init__(self, chain: List[str]) -> None:
        super().__init__(f"Import cycle detected: {' -> '.join(chain)}")
        self.chain = chain

class PlaceholderError(ShaderAssemblyError):
    """
    Raised when a rule is spliced into a template that does not hold exactly
    one placeholder.

    Attributes:
        placeholder (`str`): The placeholder token.
        count (`int`): How many times the token was found.
    """

    def __init__(self, placeholder: str, count: int, file_name: Optional[str] = None) -> None:
        location = f" in {file_name}" if file_name is not None else ""
        super().__init__(f"Expected exactly one '{placeholder}'{location}, found {count}")
        self.placeholder = placeholder
        self.count = count
        self.file_name = file_name
