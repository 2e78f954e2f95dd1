import base64

import aiohttp
import pytest

from kubeext import ConnectionInfo
from kubeext._cogs.clients.auth import APIContext, decode_to_pem

PEM = '-----BEGIN CERTIFICATE-----\nxyz\n-----END CERTIFICATE-----\n'


@pytest.mark.parametrize('scheme, token, expected', [
    (None, 'tkn', 'Bearer tkn'),
    ('Digest', 'tkn', 'Digest tkn'),
    ('Custom', None, 'Custom'),
])
async def test_authorization_header(scheme, token, expected):
    context = APIContext(ConnectionInfo(server='https://fake-host', scheme=scheme, token=token))
    try:
        assert context.session.headers['Authorization'] == expected
    finally:
        await context.close()


async def test_no_authorization_header_without_tokens():
    context = APIContext(ConnectionInfo(server='https://fake-host'))
    try:
        assert 'Authorization' not in context.session.headers
        assert context.session.auth is None
    finally:
        await context.close()


async def test_basic_auth():
    context = APIContext(ConnectionInfo(server='https://fake-host',
                                        username='user', password='pass'))
    try:
        assert context.session.auth == aiohttp.BasicAuth('user', 'pass')
    finally:
        await context.close()


async def test_user_agent_is_set(mocker):
    mocker.patch('kubeext._cogs.helpers.versions.version', '1.2.3')
    context = APIContext(ConnectionInfo(server='https://fake-host'))
    try:
        assert context.session.headers['User-Agent'] == 'kubeext/1.2.3'
    finally:
        await context.close()


async def test_owned_session_is_closed():
    context = APIContext(ConnectionInfo(server='https://fake-host'))
    assert context.session_owned
    await context.close()
    assert context.session.closed


async def test_provided_session_is_not_closed():
    session = aiohttp.ClientSession(headers={'User-Agent': 'mine'})
    try:
        context = APIContext(ConnectionInfo(server='https://fake-host'), session=session)
        assert context.session is session
        assert not context.session_owned
        assert session.headers['User-Agent'] == 'mine'
        await context.close()
        assert not session.closed
    finally:
        await session.close()


async def test_context_remembers_the_server_and_namespace():
    info = ConnectionInfo(server='https://fake-host', default_namespace='ns1')
    context = APIContext(info)
    try:
        assert context.server == 'https://fake-host'
        assert context.default_namespace == 'ns1'
    finally:
        await context.close()


def test_decode_pem_as_is():
    assert decode_to_pem(PEM) == PEM
    assert decode_to_pem(PEM.encode('ascii')) == PEM


def test_decode_base64_into_pem():
    assert decode_to_pem(base64.b64encode(PEM.encode('ascii'))) == PEM
    assert decode_to_pem(base64.b64encode(PEM.encode('ascii')).decode('ascii')) == PEM
