from .app import create_app
from .context import ApiContext, CounterState

__version__ = '0.1.0'

__all__ = ['create_app', 'ApiContext', 'CounterState']
