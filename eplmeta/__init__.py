from eplmeta.config import GeneratorConfig
from eplmeta.errors import GeneratorError
from eplmeta.generate import OverridesDocument, generate

__all__ = ['GeneratorConfig', 'GeneratorError', 'OverridesDocument', 'generate']
