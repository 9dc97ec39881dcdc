from .base.errors import ShaderAssemblyError
from .base.errors import MissingTemplateError
from .base.errors import MissingImportError
from .base.errors import DuplicateImportPathError
from .base.errors import ImportCycleError
from .base.errors import PlaceholderError

from .base.init import LogLevel
from .base.init import initialize
from .base.init import is_initialized
from .base.init import get_logger
from .base.init import log, log_error, log_warning, log_info, log_verbose, set_log_level

from .base.config import AssemblerConfig
from .base.config import DEFAULT_ASSET_ROOT, DEFAULT_PLACEHOLDER
from .base.config import DEBUG_SHADER_ENV, ASSET_ROOT_ENV

from .shader_generation.imports import ShaderImports
from .shader_generation.imports import get_imports_from_str

from .shader_generation.shader_source import ShaderSource

from .shader_generation.assembler import ShaderAssembler
from .shader_generation.assembler import resolve_and_compile

import lifedispatch.codegen as codegen

__version__ = "0.1.0"
