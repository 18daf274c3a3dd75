import argparse
import logging
import pathlib

from . import domain
from . import handlers
from . import logger
from . import mocks
from . import serializers
from . import shared


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='pushstream',
        description='replay requests through the default handlers',
    )
    parser.add_argument('file', nargs='?', type=pathlib.Path, help='JSON array of requests')
    parser.add_argument('--verbose', action='store_true')
    arguments = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if arguments.verbose else logging.WARNING)

    requests = mocks.request_mocks
    if arguments.file is not None:
        try:
            requests = serializers.DefaultSerializer.decode_many(arguments.file.read_bytes())
        except (OSError, domain.SerializationFail) as e:
            logger.error('during read requests', file=str(arguments.file), exception=repr(e))
            return 1
        if not requests:
            logger.warn('nothing to replay', file=str(arguments.file))

    requests_stream = shared.Observable.from_iterable(requests)
    subscription = requests_stream.subscribe(handlers.default_handlers())
    logger.debug('replayed', count=len(requests))
    subscription.unsubscribe()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
