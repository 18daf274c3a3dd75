import datetime
import enum
import json
import typing

from .. import domain


def _default(value):
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    raise TypeError(f'{value.__class__.__name__} is not JSON serializable')


def _prune(request: domain.HttpRequest) -> dict[str, typing.Any]:
    if not isinstance(request, domain.HttpRequest):
        raise domain.SerializationFail('expected an HttpRequest')
    # optional fields are omitted instead of written as null
    return {k: v for k, v in domain.dump(request).items() if v is not None}


def _dumps(data) -> bytes:
    try:
        message = json.dumps(data, default=_default)
    except (TypeError, ValueError) as e:
        raise domain.SerializationFail(repr(e)) from e
    return message.encode()


def _loads(message: bytes | str):
    try:
        return json.loads(message)
    except ValueError as e:
        raise domain.SerializationFail(repr(e)) from e


class JSONSerializer:

    def encode(
        self,
        request: domain.HttpRequest,
    ) -> bytes:
        return _dumps(_prune(request))

    def encode_many(
        self,
        requests: typing.Iterable[domain.HttpRequest],
    ) -> bytes:
        return _dumps([_prune(i) for i in requests])

    def decode(
        self,
        message: bytes | str,
    ) -> domain.HttpRequest:
        return self._load(_loads(message))

    def decode_many(
        self,
        message: bytes | str,
    ) -> list[domain.HttpRequest]:
        data = _loads(message)
        if not isinstance(data, list):
            raise domain.SerializationFail('expected a JSON array')
        return [self._load(i) for i in data]

    def _load(
        self,
        data: typing.Any,
    ) -> domain.HttpRequest:
        if not isinstance(data, dict):
            raise domain.SerializationFail('expected a JSON object')
        try:
            return domain.load_request(data)
        except domain.InvalidPayload as e:
            raise domain.SerializationFail(e.message) from e
