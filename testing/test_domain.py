import datetime

import pytest

import pushstream
from pushstream import mocks


def test_load_request():
    request = pushstream.load_request({
        'method': 'POST',
        'host': 'service.example',
        'path': 'user',
        'body': {
            'name': 'User Name',
            'age': 26,
            'roles': ['user', 'admin'],
            'createdAt': '2024-01-02T03:04:05',
            'isDeleted': False,
        },
    })

    assert request.method is pushstream.HttpMethod.POST
    assert request.body is not None
    assert request.body.createdAt == datetime.datetime(2024, 1, 2, 3, 4, 5)
    assert request.params is None


def test_load_request_with_params():
    request = pushstream.load_request({
        'method': 'GET',
        'host': 'service.example',
        'path': 'user',
        'params': {'id': '3f5h67s4s'},
    })

    assert request.method is pushstream.HttpMethod.GET
    assert request.body is None
    assert request.params == {'id': '3f5h67s4s'}


@pytest.mark.parametrize('data', [
    {'host': 'service.example', 'path': 'user'},
    {'method': 'PUT', 'host': 'service.example', 'path': 'user'},
    {'method': 'GET', 'host': 1, 'path': 'user'},
    {'method': 'GET', 'host': 'service.example', 'path': 'user', 'unknown': True},
    {'method': 'GET', 'host': 'service.example', 'path': 'user', 'body': {'name': 'x', 'age': 1, 'createdAt': 'yesterday'}},
])
def test_load_invalid_request(data):
    with pytest.raises(pushstream.InvalidPayload):
        pushstream.load_request(data)


def test_errors_share_base():
    assert issubclass(pushstream.InvalidPayload, pushstream.SomethingWentWrong)
    assert issubclass(pushstream.SerializationFail, pushstream.SomethingWentWrong)
    assert pushstream.SomethingWentWrong('boom').message == 'boom'


def test_json_serializer():
    serializer = pushstream.DefaultSerializer

    message = serializer.encode(mocks.request_mocks[0])
    request = serializer.decode(message)

    assert request == mocks.request_mocks[0]


def test_json_serializer_omits_missing_fields():
    message = pushstream.JSONSerializer().encode(mocks.request_mocks[1])

    assert b'body' not in message
    assert b'"method": "GET"' in message


def test_json_serializer_many():
    serializer = pushstream.JSONSerializer()

    requests = serializer.decode_many(serializer.encode_many(mocks.request_mocks))

    assert requests == mocks.request_mocks


@pytest.mark.parametrize('message', [
    b'not json',
    b'[{"method": "GET"}]',
    b'[1, 2]',
    b'{}',
])
def test_json_serializer_fail(message):
    with pytest.raises(pushstream.SerializationFail):
        pushstream.DefaultSerializer.decode_many(message)


def test_json_serializer_expects_object():
    with pytest.raises(pushstream.SerializationFail):
        pushstream.DefaultSerializer.decode(b'[]')


@pytest.mark.parametrize('request_', [
    {'method': 'GET'},
    None,
    mocks.user_mock,
])
def test_json_serializer_encode_fail(request_):
    with pytest.raises(pushstream.SerializationFail):
        pushstream.DefaultSerializer.encode(request_)
    with pytest.raises(pushstream.SerializationFail):
        pushstream.DefaultSerializer.encode_many([mocks.request_mocks[1], request_])
