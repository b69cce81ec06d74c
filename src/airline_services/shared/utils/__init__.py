from .kana import normalize_kana as normalize_kana
from .logger import get_logger as get_logger
