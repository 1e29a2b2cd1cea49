from .cache import TranslationCache
from .translations import MISSING, TranslationStore
from .translator import Translator

__all__ = ["MISSING", "TranslationCache", "TranslationStore", "Translator"]
