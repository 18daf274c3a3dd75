import datetime

from . import domain


user_mock = domain.User(
    name='User Name',
    age=26,
    roles=['user', 'admin'],
    createdAt=datetime.datetime.now(),
    isDeleted=False,
)

request_mocks: list[domain.HttpRequest] = [
    domain.HttpRequest(
        method=domain.HttpMethod.POST,
        host='service.example',
        path='user',
        body=user_mock,
    ),
    domain.HttpRequest(
        method=domain.HttpMethod.GET,
        host='service.example',
        path='user',
        params={'id': '3f5h67s4s'},
    ),
]
