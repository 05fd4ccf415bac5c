from dataclasses import dataclass

from .errors import InvalidRequestBody

U64_MAX = 2 ** 64 - 1

FORBIDDEN_VALUE = 10


@dataclass(frozen=True)
class CounterValue:
    counter: int

    def __post_init__(self):
        value = self.counter
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U64_MAX:
            raise InvalidRequestBody(f'`counter` must be an unsigned 64-bit integer, got {value!r}')

    def to_dict(self):
        return {'counter': self.counter}

    @classmethod
    def from_dict(cls, payload):
        if not isinstance(payload, dict):
            raise InvalidRequestBody('request body must be a JSON object')
        if 'counter' not in payload:
            raise InvalidRequestBody('missing field `counter`')
        return cls(counter=payload['counter'])


@dataclass(frozen=True)
class Updated:
    pass


@dataclass(frozen=True)
class InvalidInput:
    message: str


def get_counter(ctx):
    """Fetch the current value of the counter."""
    return CounterValue(counter=ctx.counter.get())


def put_counter(ctx, update):
    """Update the current value of the counter.

    The special value 10 is not allowed and comes back as InvalidInput,
    leaving the counter untouched.
    """
    if update.counter == FORBIDDEN_VALUE:
        return InvalidInput(message=f'do not like the number {update.counter}')
    ctx.counter.set(update.counter)
    return Updated()
