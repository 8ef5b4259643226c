"""Sanskrit script conversion and prosodic annotation."""

from sikshamitra.engine import (
    annotate,
    find_all_holdings,
    find_all_pauses,
    normalize,
    to_alphasyllabic,
    to_latin_diacritic,
)
from sikshamitra.models import AnnotatedText, Holding, Kind, Pause


__version__ = "0.1.0"

__all__ = [
    'AnnotatedText',
    'Holding',
    'Kind',
    'Pause',
    'annotate',
    'find_all_holdings',
    'find_all_pauses',
    'normalize',
    'to_alphasyllabic',
    'to_latin_diacritic',
]
