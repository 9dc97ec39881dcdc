from typing import List
from typing import Optional

import dataclasses
import re

from lifedispatch.base.errors import DuplicateImportPathError
from lifedispatch.base.init import log_error

import_custom_path_regex = re.compile(r"^\s*#\s*import\s+(.+)")
define_import_path_regex = re.compile(r"^\s*#\s*define_import_path\s+(.+)")

@dataclasses.dataclass
class ShaderImports:
    """
    A dataclass holding the directives found in one shader file.

    Attributes:
        imports (List[str]): Import targets in the order they appear. A
            target imported twice is listed twice.
        import_path (Optional[str]): The directory, relative to the asset
            root, that this file's imports are looked up in.
    """
    imports: List[str] = dataclasses.field(default_factory=list)
    import_path: Optional[str] = None

    def unique_imports(self) -> List[str]:
        return list(dict.fromkeys(self.imports))

def get_imports_from_str(shader: str, file_name: Optional[str] = None) -> ShaderImports:
    """
    Scan shader text line by line for `#import <target>` and
    `#define_import_path <path>` directives.

    Args:
        shader (`str`): The shader source.
        file_name (`Optional[str]`): Used in error messages only.

    Returns:
        `ShaderImports`: The directives of the file.

    Raises:
        DuplicateImportPathError: If the file declares its import path twice.
    """

    shader_imports = ShaderImports()

    for line in shader.splitlines():
        import_match = import_custom_path_regex.match(line)

        if import_match is not None:
            shader_imports.imports.append(import_match.group(1).strip())
            continue

        path_match = define_import_path_regex.match(line)

        if path_match is not None:
            path = path_match.group(1).strip()

            if shader_imports.import_path is not None:
                log_error(f"{file_name or '<string>'} declares its import path twice: '{shader_imports.import_path}' and '{path}'")
                raise DuplicateImportPathError(shader_imports.import_path, path, file_name)

            shader_imports.import_path = path

    return shader_imports

def import_directive_regex(target: str) -> "re.Pattern":
    """
    A pattern matching every whole directive line that imports `target`.
    """
    return re.compile(
        r"^[ \t]*#[ \t]*import[ \t]+" + re.escape(target) + r"[ \t]*\r?$",
        re.MULTILINE
    )

def replace_import(shader: str, target: str, contents: str) -> str:
    # a function replacement keeps backslashes in the contents literal
    return import_directive_regex(target).sub(lambda _: contents, shader)
