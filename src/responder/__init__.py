"""
Canned Responder
Keyword-triggered canned responses with a random default pool.
"""

from .config import ResponderConfig, load_config
from .defaults import DefaultResponsePool, FALLBACK_RESPONSE
from .keywords import KeywordEntry, KeywordResponseStore
from .selector import Responder

__all__ = [
    'DefaultResponsePool',
    'FALLBACK_RESPONSE',
    'KeywordEntry',
    'KeywordResponseStore',
    'Responder',
    'ResponderConfig',
    'load_config',
]
