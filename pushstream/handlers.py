from . import domain
from . import logger
from . import shared


def handle_request(
    request: domain.HttpRequest,
) -> domain.HttpResponse:
    logger.debug(
        'new request',
        method=request.method.value,
        host=request.host,
        path=request.path,
    )
    return domain.HttpResponse(status=domain.HttpStatus.OK)


def handle_error(
    e: BaseException,
) -> domain.HttpResponse:
    logger.error('during handle request', exception=repr(e))
    return domain.HttpResponse(status=domain.HttpStatus.INTERNAL_SERVER_ERROR)


def handle_complete() -> None:
    logger.debug('complete')


def default_handlers() -> shared.EventHandlers[domain.HttpRequest]:
    return {
        'next': handle_request,
        'error': handle_error,
        'complete': handle_complete,
    }
