from functools import wraps


class RPNError(Exception):
    pass


class ParseError(RPNError):
    '''
    Token is neither a number, an operator, nor a known command.
    '''


class DivisionByZero(RPNError):
    pass


class StackUnderflow(RPNError):
    '''
    Not enough elements on the stack for the operation.

    Never shown to the user; operations just stop short.
    '''


def wrap_user_errors(fmt, error=RPNError, catch=Exception):
    '''
    Decorator that converts low-level exceptions into calculator errors.

    :param fmt: Message, formatted with the wrapped call's arguments.
    :param error: RPNError subclass to raise instead.
    :param catch: Exception type(s) to convert. Anything else propagates.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except catch as e:
                raise error(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator
