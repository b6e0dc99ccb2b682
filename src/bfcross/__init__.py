from .api import translate_file, translate_string
from .backends import Backend, get_backend
from .config import BuildOptions, TranslateOptions
from .lexer import Instruction, scan
from .pipeline import BuildReport, build
from .targets import Target
from .translator import Translator, translate

__all__ = [
    'Backend',
    'BuildOptions',
    'BuildReport',
    'Instruction',
    'Target',
    'TranslateOptions',
    'Translator',
    'build',
    'get_backend',
    'scan',
    'translate',
    'translate_file',
    'translate_string',
]
