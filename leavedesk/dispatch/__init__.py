"""
Tool dispatch: argument coercion, invocation and result wrapping.
"""
from .coercion import coerce_argument, coerce_arguments
from .dispatcher import Dispatcher
from .results import Failure, InvocationRequest, InvocationResult, Success

__all__ = [
    'Dispatcher',
    'coerce_argument',
    'coerce_arguments',
    'InvocationRequest',
    'InvocationResult',
    'Success',
    'Failure',
]
