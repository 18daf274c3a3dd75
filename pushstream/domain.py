import datetime
import enum
import typing

import dacite

from . import shared


class SomethingWentWrong(Exception):

    def __init__(
        self,
        message: str | None = None,
    ):
        super().__init__(message)
        self.message: str | None = message


class InvalidPayload(SomethingWentWrong):
    """
    record data does not match the expected shape
    """


class SerializationFail(SomethingWentWrong):
    """
    """


class HttpMethod(enum.Enum):
    GET = 'GET'
    POST = 'POST'


class HttpStatus(enum.Enum):
    OK = 200
    INTERNAL_SERVER_ERROR = 500


@shared.Domain
class User:
    name: str
    age: int
    roles: list[str] = shared.field(default_factory=list)
    createdAt: datetime.datetime = shared.field(default_factory=datetime.datetime.now)
    isDeleted: bool = False


@shared.Domain
class HttpRequest:
    method: HttpMethod
    host: str
    path: str
    body: User | None = None
    params: dict[str, str] | None = None


@shared.Domain
class HttpResponse:
    status: HttpStatus


def load_request(
    data: typing.Mapping[str, typing.Any],
) -> HttpRequest:
    try:
        return shared.load(HttpRequest, data)
    except (dacite.DaciteError, ValueError, TypeError) as e:
        raise InvalidPayload(repr(e)) from e


def dump(record) -> dict[str, typing.Any]:
    return shared.dump(record)
