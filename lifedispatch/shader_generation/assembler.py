from typing import Callable
from typing import Dict
from typing import List
from typing import Optional
from typing import TypeVar

import os

from lifedispatch.base.config import AssemblerConfig
from lifedispatch.base.errors import ShaderAssemblyError
from lifedispatch.base.errors import MissingTemplateError
from lifedispatch.base.errors import MissingImportError
from lifedispatch.base.errors import ImportCycleError
from lifedispatch.base.errors import PlaceholderError
from lifedispatch.base.init import log_error, log_warning, log_info, log_verbose

from lifedispatch.codegen.statements import Statement, to_shader

from .imports import ShaderImports, get_imports_from_str, replace_import
from .shader_source import ShaderSource

_ModuleType = TypeVar('_ModuleType')

CreateModuleFunc = Callable[[str, Optional[str]], _ModuleType]

class ShaderAssembler:
    """
    Reads shader templates from an asset root, inlines their `#import`
    directives and splices compiled rules into their placeholder.

    Imported files are expanded as well. Each file looks its imports up in
    `<asset_root>/<import_path>` when it declares `#define_import_path
    <import_path>`, otherwise directly in `<asset_root>`.

    Attributes:
        config (`AssemblerConfig`): Asset root, debug dump flag and placeholder token.
    """
    config: AssemblerConfig

    def __init__(self, config: Optional[AssemblerConfig] = None) -> None:
        self.config = config if config is not None else AssemblerConfig()

    def get_imports_from_str(self, shader: str, file_name: Optional[str] = None) -> ShaderImports:
        return get_imports_from_str(shader, file_name)

    def asset_path(self, relative_path: str) -> str:
        return os.path.join(self.config.asset_root, relative_path)

    def is_inside_asset_root(self, relative_path: str) -> bool:
        root = os.path.realpath(self.config.asset_root)
        path = os.path.realpath(self.asset_path(relative_path))

        try:
            return os.path.commonpath([root, path]) == root
        except ValueError:
            # paths on different drives
            return False

    def debug_path(self, template_path: str) -> str:
        extension = os.path.splitext(template_path)[1].lstrip(".")

        if len(extension) == 0:
            extension = "wgsl"

        return self.asset_path(f"{template_path}.debug.{extension}")

    def _read(self, relative_path: str) -> str:
        path = self.asset_path(relative_path)
        log_verbose(f"Reading shader file {path}")

        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def resolve(self, template_path: str) -> str:
        """
        Read a template and inline everything it imports.

        Args:
            template_path (`str`): The template, relative to the asset root.

        Returns:
            `str`: The template text with every import directive replaced.

        Raises:
            MissingTemplateError: If the template can not be read or lies outside the asset root.
            MissingImportError: If an imported file can not be read or lies outside the asset root.
            ImportCycleError: If the imports loop back on themselves.
            DuplicateImportPathError: If a file declares its import path twice.
        """

        root_name = os.path.normpath(template_path)

        if not self.is_inside_asset_root(root_name):
            log_error(f"Shader file {template_path} is outside the asset root {self.config.asset_root}")
            raise MissingTemplateError(self.asset_path(root_name))

        try:
            shader_contents = self._read(root_name)
        except OSError as err:
            log_error(f"Failed to read shader file: {template_path}")
            raise MissingTemplateError(self.asset_path(root_name)) from err

        return self._expand_imports(root_name, shader_contents, {}, [root_name])

    def _expand_imports(self, file_name: str, shader_contents: str, resolved: Dict[str, str], stack: List[str]) -> str:
        imports = self.get_imports_from_str(shader_contents, file_name)

        for target in imports.unique_imports():
            if imports.import_path is not None:
                target_name = os.path.normpath(os.path.join(imports.import_path, target))
            else:
                target_name = os.path.normpath(target)

            if not self.is_inside_asset_root(target_name):
                log_error(f"Import '{target}' in {file_name} is outside the asset root {self.config.asset_root}")
                raise MissingImportError(file_name, target, self.asset_path(target_name))

            if target_name in stack:
                chain = stack[stack.index(target_name):] + [target_name]
                log_error(f"Import cycle detected: {' -> '.join(chain)}")
                raise ImportCycleError(chain)

            if target_name not in resolved:
                try:
                    import_contents = self._read(target_name)
                except OSError as err:
                    log_error(f"Failed to read import file: {target} {err}")
                    raise MissingImportError(file_name, target, self.asset_path(target_name)) from err

                stack.append(target_name)
                resolved[target_name] = self._expand_imports(target_name, import_contents, resolved, stack)
                stack.pop()

            log_info(f"Expanding import '{target}' in {file_name}")
            shader_contents = replace_import(shader_contents, target, resolved[target_name])

        return shader_contents

    def splice_rule(self, shader: str, statement: Statement, file_name: Optional[str] = None) -> str:
        """
        Replace the placeholder of resolved shader text with a compiled rule.

        Raises:
            PlaceholderError: If the placeholder is missing or appears more than once.
        """

        placeholder = self.config.placeholder
        count = shader.count(placeholder)

        if count != 1:
            log_error(f"Expected exactly one '{placeholder}' in {file_name}, found {count}")
            raise PlaceholderError(placeholder, count, file_name)

        return shader.replace(placeholder, to_shader(statement))

    def resolve_with_rule(self, template_path: str, statement: Statement) -> str:
        return self.splice_rule(self.resolve(template_path), statement, template_path)

    def write_debug_shader(self, template_path: str, source: str) -> str:
        path = self.debug_path(template_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(source)
        except OSError as err:
            log_error(f"Failed to write shader file: {path}")
            raise ShaderAssemblyError(f"Failed to write shader file: {path}") from err

        log_info(f"Wrote resolved shader to {path}")
        return path

    def assemble(self, template_path: str, statement: Optional[Statement] = None, label: Optional[str] = None) -> ShaderSource:
        """
        Resolve a template, splice in a rule if one is given, and write the
        debug copy when the config asks for it.

        Args:
            template_path (`str`): The template, relative to the asset root.
            statement (`Optional[Statement]`): The rule to splice into the placeholder.
            label (`Optional[str]`): A label passed along with the source.

        Returns:
            `ShaderSource`: The resolved source.
        """

        if statement is None:
            source = self.resolve(template_path)

            if self.config.placeholder in source:
                log_warning(f"{template_path} still contains '{self.config.placeholder}' but no rule was given")
        else:
            source = self.resolve_with_rule(template_path, statement)

        if self.config.debug_shader:
            self.write_debug_shader(template_path, source)

        return ShaderSource(template_path, source, label)

    def load_shader(self, create_module: CreateModuleFunc, template_path: str, label: Optional[str] = None) -> _ModuleType:
        """
        Resolve a template and hand the source to `create_module(source, label)`.
        """
        shader = self.assemble(template_path, label=label)
        return create_module(shader.source, label)

    def load_shader_with_rule(self, create_module: CreateModuleFunc, template_path: str, statement: Statement, label: Optional[str] = None) -> _ModuleType:
        """
        Resolve a template, splice a compiled rule into its placeholder, and
        hand the source to `create_module(source, label)`.
        """
        shader = self.assemble(template_path, statement, label)
        return create_module(shader.source, label)

def resolve_and_compile(
        template_path: str,
        statement: Optional[Statement] = None,
        config: Optional[AssemblerConfig] = None) -> str:
    """
    Resolve a template with a fresh assembler. When no config is given it is
    read from the environment.
    """

    if config is None:
        config = AssemblerConfig.from_environment()

    return ShaderAssembler(config).assemble(template_path, statement).source
