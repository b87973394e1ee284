from .errors import SubsweepError, ResolverInitError, LookupFailure, SerializationError, WordlistError
from .models import Host, ScanState
from .engine import ResolutionEngine
from .tracker import ProgressTracker
from .scan import run_scan

__version__ = "0.1.0"

__all__ = [
    'Host',
    'ScanState',
    'ResolutionEngine',
    'ProgressTracker',
    'run_scan',
    'SubsweepError',
    'ResolverInitError',
    'LookupFailure',
    'SerializationError',
    'WordlistError',
]
