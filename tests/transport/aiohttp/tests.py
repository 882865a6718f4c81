import asyncio
from unittest.mock import Mock

import aiohttp
import pytest

from sentry_client.exceptions import TransportError
from sentry_client.transport.aiohttp import AIOHTTPTransport

URL = 'https://sentry.local/api/1/store/'


class FakeResponse(object):
    def __init__(self, status=200, headers=None, body=b''):
        self.status = status
        self.headers = headers or {}
        self.body = body

    async def read(self):
        return self.body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass


@pytest.fixture
def mock_client_post(mocker):
    mock = Mock(return_value=FakeResponse(200, {}, b'{"id": "abc123"}'))
    return mocker.patch.object(aiohttp.ClientSession, 'post', mock)


@pytest.fixture
def mock_client_post_error(mocker):
    mock = Mock(side_effect=aiohttp.ClientError('connection refused'))
    return mocker.patch.object(aiohttp.ClientSession, 'post', mock)


@pytest.fixture
def mock_client_post_timeout(mocker):
    mock = Mock(side_effect=asyncio.TimeoutError())
    return mocker.patch.object(aiohttp.ClientSession, 'post', mock)


@pytest.mark.asyncio
async def test_aiohttp_transport_send(mock_client_post):
    transport = AIOHTTPTransport()
    headers = {'Content-Type': 'application/json'}
    try:
        response = await transport.send(URL, b'{}', headers)
    finally:
        await transport.close()

    assert mock_client_post.call_args_list[0][0][0] == URL
    assert mock_client_post.call_args_list[0][1] == {
        'data': b'{}', 'headers': headers}
    assert response.status == 200
    assert response.json() == {'id': 'abc123'}


@pytest.mark.asyncio
async def test_aiohttp_transport_error_status_is_returned(mocker):
    mocker.patch.object(aiohttp.ClientSession, 'post', Mock(
        return_value=FakeResponse(400, {'X-Sentry-Error': 'invalid api key'})))
    transport = AIOHTTPTransport()
    try:
        response = await transport.send(URL, b'{}', {})
    finally:
        await transport.close()

    assert response.status == 400
    assert response.get_header('x-sentry-error') == 'invalid api key'


@pytest.mark.asyncio
async def test_aiohttp_transport_with_error(mock_client_post_error):
    transport = AIOHTTPTransport()
    try:
        with pytest.raises(TransportError) as excinfo:
            await transport.send(URL, b'{}', {})
    finally:
        await transport.close()

    assert excinfo.value.url == URL
    assert isinstance(excinfo.value.__cause__, aiohttp.ClientError)
    assert 'Unable to reach Sentry server' in str(excinfo.value)


@pytest.mark.asyncio
async def test_aiohttp_transport_with_timeout(mock_client_post_timeout):
    transport = AIOHTTPTransport(timeout='3')
    try:
        with pytest.raises(TransportError) as excinfo:
            await transport.send(URL, b'{}', {})
    finally:
        await transport.close()

    assert transport.timeout == 3
    assert 'Connection to Sentry server timed out' in str(excinfo.value)


@pytest.mark.asyncio
async def test_aiohttp_transport_injected_session():
    session = Mock()
    session.closed = False
    session.post.return_value = FakeResponse(200, {}, b'{"id": "1"}')
    transport = AIOHTTPTransport(session=session)

    response = await transport.send(URL, b'{}', {})
    await transport.close()

    assert response.json() == {'id': '1'}
    session.post.assert_called_once_with(URL, data=b'{}', headers={})
    assert not session.close.called


@pytest.mark.asyncio
async def test_aiohttp_transport_close_is_idempotent():
    transport = AIOHTTPTransport()
    session = transport.session
    await transport.close()
    await transport.close()

    assert session.closed
    assert transport.closed


def test_aiohttp_transport_lazy_session():
    transport = AIOHTTPTransport()
    assert transport.closed
    assert transport._session is None


def test_aiohttp_transport_options_from_strings():
    transport = AIOHTTPTransport(timeout='0.5', verify_ssl='0')
    assert transport.timeout == 0.5
    assert transport.verify_ssl is False


def test_aiohttp_transport_invalid_timeout():
    with pytest.raises(ValueError):
        AIOHTTPTransport(timeout='abc')


def test_aiohttp_transport_ssl_context():
    assert AIOHTTPTransport().get_ssl_context() is True
    assert AIOHTTPTransport(verify_ssl=False).get_ssl_context() is False


def test_aiohttp_transport_ssl_context_with_ca_certs(mocker):
    create_default_context = mocker.patch('ssl.create_default_context')
    transport = AIOHTTPTransport(ca_certs='/etc/ssl/sentry.pem')

    context = transport.get_ssl_context()

    create_default_context.assert_called_once_with(
        cafile='/etc/ssl/sentry.pem')
    assert context is create_default_context.return_value
